"""Main CLI entry point for cppcondition.

Provides commands: parse, variables, tokens
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from cppcondition.cli.parse import parse_command, tokens_command, variables_command

logger = logging.getLogger("cppcondition.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def _add_interpreter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "expression",
        help="Condition text, e.g. 'defined(A) && B > 2'",
    )
    parser.add_argument(
        "--non-boolean",
        action="store_true",
        help="Keep literals, macros and non-Boolean operators instead of "
        "translating to a strict Boolean formula",
    )
    parser.add_argument(
        "--fuzzy",
        action="store_true",
        help="Encode comparisons and bare variables as synthesized variables "
        "(Boolean mode only)",
    )
    parser.add_argument(
        "--linux-macros",
        action="store_true",
        help="Translate IS_ENABLED, IS_MODULE and IS_BUILTIN",
    )
    parser.add_argument(
        "--invalid",
        choices=["exception", "true", "error_variable"],
        help="How to handle invalid conditions in Boolean mode (default: exception)",
    )
    parser.add_argument(
        "--config",
        help="Settings file (.toml/.json) or inline TOML/JSON settings",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cppcondition",
        description="cppcondition - C preprocessor condition parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a condition and print the resulting formula",
    )
    _add_interpreter_arguments(parse_parser)
    parse_parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json", "graphml", "dot"],
        default="text",
        help="Output format (default: text)",
    )
    parse_parser.add_argument(
        "--show-ast",
        action="store_true",
        help="Print the resolved expression tree before the formula",
    )

    variables_parser = subparsers.add_parser(
        "variables",
        help="Print the variables a condition depends on",
    )
    _add_interpreter_arguments(variables_parser)

    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the lexer tokens of a condition",
    )
    tokens_parser.add_argument("expression", help="Condition text")

    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.command == "parse":
        return parse_command(args)
    if args.command == "variables":
        return variables_command(args)
    if args.command == "tokens":
        return tokens_command(args)

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
