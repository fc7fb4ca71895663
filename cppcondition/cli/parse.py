"""Parse, variables and tokens command implementations."""

from __future__ import annotations

import json
import logging
from typing import List, Optional, Tuple, Union

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from cppcondition.conditions import CppConditionParser, CppNonBooleanConditionParser
from cppcondition.config import CppParsingSettings, load_settings
from cppcondition.errors import ExpressionFormatError
from cppcondition.export.dot import export_dot
from cppcondition.export.graphml import export_graphml
from cppcondition.export.json import export_json
from cppcondition.logic import Formula, find_variables, to_text
from cppcondition.parser import CppParser, lex
from cppcondition.parser import ast
from cppcondition.parser.tokens import BracketToken, IdentifierToken, LiteralToken, OperatorToken

logger = logging.getLogger("cppcondition.cli.parse")

Interpreter = Union[CppConditionParser, CppNonBooleanConditionParser]


def _settings_from_args(args) -> CppParsingSettings:
    """Merge a settings source with command-line overrides."""
    settings = load_settings(getattr(args, "config", None))
    overrides = {}
    if getattr(args, "linux_macros", False):
        overrides["handle_linux_macros"] = True
    if getattr(args, "fuzzy", False):
        overrides["fuzzy_parsing"] = True
    if getattr(args, "invalid", None):
        overrides["invalid_condition"] = args.invalid
    if not overrides:
        return settings
    return CppParsingSettings.from_dict({**settings.model_dump(), **overrides})


def _build_interpreter(args, settings: CppParsingSettings) -> Interpreter:
    if getattr(args, "non_boolean", False):
        return CppNonBooleanConditionParser.from_settings(settings)
    return CppConditionParser.from_settings(settings)


def _ast_label(node: ast.CppExpression) -> Tuple[str, List[ast.CppExpression]]:
    if isinstance(node, ast.Operator):
        label = f"[bold]{node.operator.symbol}[/bold] ({node.operator.name})"
        return label, [side for side in (node.left, node.right) if side is not None]
    if isinstance(node, ast.FunctionCall):
        label = f"[cyan]{node.name}()[/cyan]"
        return label, [node.argument] if node.argument is not None else []
    return str(node), []


def _ast_tree(root: ast.CppExpression) -> Tree:
    label, children = _ast_label(root)
    tree = Tree(label)
    pending = [(child, tree) for child in reversed(children)]

    while pending:
        node, parent = pending.pop()
        label, children = _ast_label(node)
        branch = parent.add(label)
        pending.extend((child, branch) for child in reversed(children))
    return tree


def _render(formula: Formula, fmt: str) -> Optional[str]:
    if fmt == "json":
        return json.dumps(export_json(formula), indent=2, ensure_ascii=False)
    if fmt == "graphml":
        return export_graphml(formula)
    if fmt == "dot":
        return export_dot(formula)
    return to_text(formula)


def _report_error(err: ExpressionFormatError) -> int:
    Console(stderr=True).print(str(err), markup=False, highlight=False, soft_wrap=True)
    return 1


def parse_command(args) -> int:
    """Execute the parse command.

    Args:
        args: Parsed command-line arguments containing:
            - expression: Condition text
            - non_boolean / fuzzy / linux_macros / invalid / config
            - format: Output format (text, json, graphml, dot)
            - show_ast: Print the resolved expression tree first

    Returns:
        int: Exit code (0 for success, 1 for invalid conditions, 2 for bad settings).
    """
    console = Console()
    try:
        settings = _settings_from_args(args)
    except ValueError as err:
        logger.error("Invalid settings: %s", err)
        return 2

    interpreter = _build_interpreter(args, settings)
    logger.debug("Using %s with %s", type(interpreter).__name__, settings)

    try:
        if getattr(args, "show_ast", False):
            console.print(_ast_tree(CppParser().parse(args.expression)))
        formula = interpreter.parse(args.expression)
    except ExpressionFormatError as err:
        return _report_error(err)

    output = _render(formula, getattr(args, "format", "text"))
    if output is None:
        logger.error("Export format %s is not available", args.format)
        return 2
    console.print(output, markup=False, highlight=False, soft_wrap=True)
    return 0


def variables_command(args) -> int:
    """Print the sorted names of all variables in a condition."""
    console = Console()
    try:
        settings = _settings_from_args(args)
    except ValueError as err:
        logger.error("Invalid settings: %s", err)
        return 2

    interpreter = _build_interpreter(args, settings)
    try:
        formula = interpreter.parse(args.expression)
    except ExpressionFormatError as err:
        return _report_error(err)

    for name in sorted(find_variables(formula)):
        console.print(name, markup=False, highlight=False)
    return 0


def tokens_command(args) -> int:
    """Print the lexer output for a condition as a table."""
    try:
        tokens = lex(args.expression)
    except ExpressionFormatError as err:
        return _report_error(err)

    table = Table(title="Tokens")
    table.add_column("Pos", justify="right")
    table.add_column("Kind")
    table.add_column("Value")

    for token in tokens:
        if isinstance(token, BracketToken):
            kind, value = "bracket", "(" if token.is_opening else ")"
        elif isinstance(token, OperatorToken):
            kind, value = "operator", f"{token.operator.symbol} ({token.operator.name})"
        elif isinstance(token, LiteralToken):
            kind, value = "literal", str(token.value)
        elif isinstance(token, IdentifierToken):
            kind, value = "identifier", token.name
        else:
            kind, value = "unknown", repr(token)
        table.add_row(str(token.pos), kind, value)

    Console().print(table)
    return 0
