"""
L1 Domain — Value normalization (pure).

Coerces raw per-argument input into a typed scalar according to the
argument's declared type, and decides whether the result counts as
"present" for everything downstream.
No I/O.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any

from cmdforge.core.models.command import ArgumentSpec, CommandDefinition
from cmdforge.core.models.resolution import ErrorCode, ValidationError

logger = logging.getLogger(__name__)

_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})

# Plain decimal notation only: no exponents, digit separators or radix prefixes.
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


@dataclass(frozen=True)
class NormalizedValue:
    """A normalized argument value, or the local error that replaced it."""

    arg: ArgumentSpec
    value: Any = None
    error: ValidationError | None = None

    @property
    def present(self) -> bool:
        """Whether the value counts as supplied.

        checkbox → True; text/select → non-empty; number → defined
        (0 included). A value with a local error is never present.
        """
        if self.error is not None:
            return False
        if self.arg.type == "checkbox":
            return self.value is True
        if self.arg.type == "number":
            return self.value is not None
        return isinstance(self.value, str) and self.value != ""


def _error(arg: ArgumentSpec, code: ErrorCode, message: str) -> NormalizedValue:
    return NormalizedValue(arg=arg, error=ValidationError(code=code, message=message, arg_id=arg.id))


def _coerce_bool(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() not in _FALSE_STRINGS
    return bool(raw)


def _normalize_checkbox(arg: ArgumentSpec, raw: Any) -> NormalizedValue:
    if raw is None:
        raw = arg.default if arg.default is not None else False
    return NormalizedValue(arg=arg, value=_coerce_bool(raw))


def _normalize_text(arg: ArgumentSpec, raw: Any) -> NormalizedValue:
    text = "" if raw is None else raw if isinstance(raw, str) else str(raw)
    if text == "" and not arg.required and arg.default not in (None, ""):
        text = str(arg.default)
    return NormalizedValue(arg=arg, value=text)


def _parse_number(raw: Any) -> int | float | None:
    """Parse a number or a plain decimal string; ``None`` when unparsable."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        num = raw
    else:
        text = str(raw).strip()
        if not _DECIMAL_RE.fullmatch(text):
            return None
        try:
            num = float(text) if "." in text else int(text)
        except ValueError:  # beyond the int digit limit
            return None
    if isinstance(num, float):
        if not math.isfinite(num):
            return None
        if num.is_integer():
            return int(num)
    return num


def _normalize_number(arg: ArgumentSpec, raw: Any) -> NormalizedValue:
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return NormalizedValue(arg=arg, value=None)

    num = _parse_number(raw)
    if num is None:
        return _error(arg, ErrorCode.INVALID_NUMBER, f"'{arg.id}' must be a number, got {raw!r}")

    # No clamping: out-of-range input is reported, not corrected.
    if arg.min is not None and num < arg.min:
        return _error(arg, ErrorCode.OUT_OF_RANGE, f"'{arg.id}' must be >= {_fmt_bound(arg.min)}")
    if arg.max is not None and num > arg.max:
        return _error(arg, ErrorCode.OUT_OF_RANGE, f"'{arg.id}' must be <= {_fmt_bound(arg.max)}")

    return NormalizedValue(arg=arg, value=num)


def _normalize_select(arg: ArgumentSpec, raw: Any) -> NormalizedValue:
    text = "" if raw is None else raw if isinstance(raw, str) else str(raw)
    if text == "":
        return NormalizedValue(arg=arg, value="")
    allowed = arg.option_values
    if text not in allowed:
        choices = ", ".join(v for v in allowed if v) or "(none)"
        return _error(arg, ErrorCode.INVALID_OPTION, f"'{arg.id}' must be one of: {choices}")
    return NormalizedValue(arg=arg, value=text)


_NORMALIZERS = {
    "checkbox": _normalize_checkbox,
    "text": _normalize_text,
    "number": _normalize_number,
    "select": _normalize_select,
}


def _fmt_bound(bound: float) -> str:
    return str(int(bound)) if float(bound).is_integer() else str(bound)


def normalize_value(arg: ArgumentSpec, raw: Any) -> NormalizedValue:
    """Normalize one raw input against its argument spec."""
    return _NORMALIZERS[arg.type](arg, raw)


def normalize_values(
    command: CommandDefinition,
    values: dict[str, Any],
) -> dict[str, NormalizedValue]:
    """Normalize a whole ValueAssignment.

    Returns one entry per declared argument, in declaration order.
    Keys of ``values`` that match no argument are ignored.
    """
    unknown = [k for k in values if command.get_arg(k) is None]
    if unknown:
        logger.debug("Ignoring unknown value keys for %s: %s", command.id, unknown)

    return {arg.id: normalize_value(arg, values.get(arg.id)) for arg in command.args}
