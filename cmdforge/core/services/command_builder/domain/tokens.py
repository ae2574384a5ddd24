"""
L1 Domain — Token assembly (pure).

Turns normalized values into a flat token sequence following the
conventional ``tool [flags…] [positionals…]`` grammar:

    1. switches (checkbox flags) in declaration order
    2. valued flags (text/number/select) in declaration order
    3. positionals in ascending position order

Commands marked ``positionals_first`` (``find PATH -type f …``) emit
step 3 before steps 1 and 2.

The input mapping's key order never matters.
No I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cmdforge.core.models.command import ArgumentSpec, CommandDefinition
from cmdforge.core.models.resolution import ErrorCode, ValidationError
from cmdforge.core.services.command_builder.domain.normalize import NormalizedValue
from cmdforge.core.services.command_builder.domain.quoting import render_value


@dataclass
class AssembledTokens:
    """Rendered tokens, kept in their two groups."""

    flags: list[str] = field(default_factory=list)
    positionals: list[str] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)
    positionals_first: bool = False

    @property
    def tokens(self) -> list[str]:
        if self.positionals_first:
            return [*self.positionals, *self.flags]
        return [*self.flags, *self.positionals]


def _joins_value(flag: str) -> bool:
    """Assignment-style (``-type=``) and suffix-style (``-``) flags."""
    return flag.endswith("=") or flag == "-"


def render_flag(flag: str, arg: ArgumentSpec, value: object) -> list[str]:
    """Render one present flagged argument under ``flag``."""
    if arg.type == "checkbox":
        return [flag]
    rendered = render_value(arg, value)
    if _joins_value(flag):
        return [flag + rendered]
    return [flag, rendered]


def _find_gap(command: CommandDefinition, present: set[str]) -> int | None:
    """Lowest present position sitting above an absent positional."""
    hole = False
    for arg in command.positionals:
        if arg.id not in present:
            hole = True
        elif hole:
            return arg.position
    return None


def assemble_tokens(
    command: CommandDefinition,
    normalized: dict[str, NormalizedValue],
) -> AssembledTokens:
    """Order and render every present argument of one command instance.

    Arguments with neither a flag nor a position are skipped. A hole
    between positionals is reported as ``PositionalGap``; the tokens
    are still assembled for preview.
    """
    result = AssembledTokens(positionals_first=command.positionals_first)
    present = {arg_id for arg_id, nv in normalized.items() if nv.present}

    switches: list[str] = []
    valued: list[str] = []
    for arg in command.args:
        if arg.id not in present or arg.flag is None:
            continue
        tokens = render_flag(arg.flag, arg, normalized[arg.id].value)
        (switches if arg.is_switch else valued).extend(tokens)
    result.flags = switches + valued

    for arg in command.positionals:
        if arg.id in present:
            result.positionals.append(render_value(arg, normalized[arg.id].value))

    gap = _find_gap(command, present)
    if gap is not None:
        result.errors.append(ValidationError(
            code=ErrorCode.POSITIONAL_GAP,
            message=f"position {gap} is set but an earlier positional is empty",
            position=gap,
            command_id=command.id,
        ))

    return result
