"""Translation of ``defined()`` and the Linux configuration macros.

Shared by both interpreters: ``defined(X)`` is always known, ``IS_ENABLED``,
``IS_MODULE`` and ``IS_BUILTIN`` only when Linux macro handling is on.
"""

from __future__ import annotations

from typing import Optional

from cppcondition.errors import SemanticError
from cppcondition.logic.formula import Disjunction, Formula, Variable
from cppcondition.parser import ast

DEFINED = "defined"
IS_ENABLED = "IS_ENABLED"
IS_MODULE = "IS_MODULE"
IS_BUILTIN = "IS_BUILTIN"

LINUX_MACROS = frozenset({IS_ENABLED, IS_MODULE, IS_BUILTIN})

MODULE_SUFFIX = "_MODULE"


def is_known_macro(name: str, handle_linux_macros: bool) -> bool:
    return name == DEFINED or (handle_linux_macros and name in LINUX_MACROS)


def macro_variable(call: ast.FunctionCall, expression: Optional[str] = None) -> Variable:
    """Return the variable argument of ``call``.

    Raises:
        SemanticError: If the call has no argument or its argument is not a
            plain variable.
    """
    markers = [call.pos] if call.pos is not None else []
    if call.argument is None:
        raise SemanticError(
            f"Can't handle function {call.name} without argument", expression, markers
        )
    if not isinstance(call.argument, ast.Variable):
        raise SemanticError(
            f"{call.name}() call without variable", expression, markers
        )
    return Variable(call.argument.name)


def translate_macro(
    call: ast.FunctionCall, handle_linux_macros: bool, expression: Optional[str] = None
) -> Optional[Formula]:
    """Translate a known macro call into a Boolean formula.

    Args:
        call: Resolved function call.
        handle_linux_macros: Whether IS_ENABLED/IS_MODULE/IS_BUILTIN are known.
        expression: Original condition text, for error rendering.

    Returns:
        The translated formula, or None if ``call.name`` is not a known macro.

    Raises:
        SemanticError: If a known macro is not called with a single variable.
    """
    if not is_known_macro(call.name, handle_linux_macros):
        return None

    variable = macro_variable(call, expression)
    if call.name == IS_ENABLED:
        return Disjunction(variable, Variable(variable.name + MODULE_SUFFIX))
    if call.name == IS_MODULE:
        return Variable(variable.name + MODULE_SUFFIX)
    return variable
