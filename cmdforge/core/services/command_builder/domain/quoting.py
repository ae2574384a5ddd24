"""
L1 Domain — Shell quoting policy (pure).

Text values are single-quoted when they contain a shell-significant
character, or when the argument carries free-form content for the
target program (patterns, program bodies, expressions, messages).
Those are quoted even when the literal value is harmless, since
their other values routinely are not.

Number and select values are never quoted.
"""

from __future__ import annotations

from typing import Any

from cmdforge.core.models.command import ArgumentSpec

_SPECIAL_CHARS = frozenset(" $`\"';|&()<>*?[]{},\t\n\r\\!#")
"""Any of these in a text value forces quoting."""

FREE_FORM_ARG_IDS = frozenset({
    "pattern", "program", "expression", "set1", "set2", "data",
    "message", "exec", "text", "body", "script", "query", "regex",
})
"""Argument ids whose values are interpreted by the target program."""


def is_free_form(arg: ArgumentSpec) -> bool:
    """Whether the argument's values are always quoted.

    An explicit ``quote`` on the argument wins over the id-based guess.
    """
    if arg.quote is not None:
        return arg.quote
    return arg.id in FREE_FORM_ARG_IDS


def needs_quoting(arg: ArgumentSpec, value: str) -> bool:
    if arg.type != "text":
        return False
    return is_free_form(arg) or any(ch in _SPECIAL_CHARS for ch in value)


def shell_quote(value: str) -> str:
    """Wrap in single quotes; an embedded ``'`` becomes ``'\\''``."""
    return "'" + value.replace("'", "'\\''") + "'"


def render_value(arg: ArgumentSpec, value: Any) -> str:
    """Render one normalized, present value as a shell word."""
    text = value if isinstance(value, str) else str(value)
    return shell_quote(text) if needs_quoting(arg, text) else text
