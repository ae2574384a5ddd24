"""
Resolution results — what the engine hands back to callers.

The engine never raises for bad input. Every problem becomes a
``ValidationError`` record collected on the result, so a caller can
show all of them at once and decide what to do.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable identifiers for every resolution failure."""

    # ── Local (one argument) ──
    INVALID_NUMBER = "InvalidNumber"
    OUT_OF_RANGE = "OutOfRange"
    INVALID_OPTION = "InvalidOption"

    # ── Cross-argument ──
    MISSING_REQUIRED = "MissingRequired"
    CONFLICTING_ARGUMENTS = "ConflictingArguments"
    UNMET_DEPENDENCY = "UnmetDependency"

    # ── Structural ──
    POSITIONAL_GAP = "PositionalGap"
    UNKNOWN_COMMAND = "UnknownCommand"


@dataclass(frozen=True)
class ValidationError:
    """A single reportable problem with one resolution attempt."""

    code: ErrorCode
    message: str
    arg_id: str | None = None
    other_id: str | None = None      # second party of a conflict or dependency
    position: int | None = None
    command_id: str | None = None

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.arg_id is not None:
            result["arg"] = self.arg_id
        if self.other_id is not None:
            result["other"] = self.other_id
        if self.position is not None:
            result["position"] = self.position
        if self.command_id is not None:
            result["command"] = self.command_id
        return result


@dataclass
class ResolvedCommand:
    """Outcome of resolving one command instance.

    ``tokens`` excludes the base invocation; ``command`` is the full
    string. Both are filled even when ``errors`` is non-empty so the
    caller can preview what it would get.
    """

    command_id: str
    base: str = ""
    tokens: list[str] = field(default_factory=list)
    command: str = ""
    errors: list[ValidationError] = field(default_factory=list)
    risk: str = "none"
    warnings: list[str] = field(default_factory=list)
    escalation: dict | None = None
    present: list[str] = field(default_factory=list)     # argument ids that made it in

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "commandId": self.command_id,
            "base": self.base,
            "valid": self.valid,
            "tokens": list(self.tokens),
            "command": self.command,
            "errors": [e.to_dict() for e in self.errors],
            "riskSeverity": self.risk,
            "warnings": list(self.warnings),
            "escalation": self.escalation,
            "present": list(self.present),
        }


@dataclass
class ChainResult:
    """Outcome of resolving a whole chain.

    ``command`` is ``None`` whenever any item failed; a partial
    pipeline is never produced. ``tokens`` holds every item's base
    words and tokens with the operators in between.
    """

    items: list[ResolvedCommand] = field(default_factory=list)
    command: str | None = None
    tokens: list[str] = field(default_factory=list)
    errors: dict[int, list[ValidationError]] = field(default_factory=dict)
    risk: str = "none"
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "command": self.command,
            "tokens": list(self.tokens),
            "errors": {
                str(index): [e.to_dict() for e in errs]
                for index, errs in sorted(self.errors.items())
            },
            "riskSeverity": self.risk,
            "warnings": list(self.warnings),
            "items": [item.to_dict() for item in self.items],
        }
