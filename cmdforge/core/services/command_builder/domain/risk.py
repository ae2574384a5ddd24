"""
L1 Domain — Risk assessment (pure).

Aggregate the command's baseline danger level with the danger markers
of the arguments actually in use. Advisory only: nothing here blocks
serialization or produces a validation error.
No I/O.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from cmdforge.core.models.command import CommandDefinition
from cmdforge.core.services.command_builder.domain.normalize import NormalizedValue

_RISK_ORDER = {"none": 0, "caution": 1, "dangerous": 2}
_RISK_LEVELS = ("none", "caution", "dangerous")


@dataclass
class RiskAssessment:
    level: str = "none"
    warnings: list[str] = field(default_factory=list)
    danger_args: list[str] = field(default_factory=list)


def _max_risk(levels: Iterable[str]) -> str:
    """Highest of the given levels (``"none"`` for an empty input)."""
    rank = max((_RISK_ORDER.get(lvl, 0) for lvl in levels), default=0)
    return _RISK_LEVELS[rank]


def assess_risk(
    command: CommandDefinition,
    normalized: dict[str, NormalizedValue],
) -> RiskAssessment:
    """Compute severity and warnings for one command instance.

    Rules:
        1. Start from ``command.danger_level``.
        2. One present ``danger`` argument → at least **caution**.
        3. Two or more present ``danger`` arguments → **dangerous**
           (force + recursive together is worse than either alone).

    Warnings of every present argument are collected in declaration
    order and never deduplicated.
    """
    assessment = RiskAssessment()

    for arg in command.args:
        if not normalized[arg.id].present:
            continue
        if arg.danger:
            assessment.danger_args.append(arg.id)
        if arg.warning:
            assessment.warnings.append(arg.warning)

    levels = [command.danger_level]
    if len(assessment.danger_args) >= 2:
        levels.append("dangerous")
    elif assessment.danger_args:
        levels.append("caution")

    assessment.level = _max_risk(levels)
    return assessment


def _check_risk_escalation(base_risk: str, resolved_risk: str) -> dict | None:
    """Check if the chosen arguments escalated risk beyond the command's baseline.

    Returns:
        Escalation dict ``{"from": "none", "to": "caution", "reason": "..."}``
        or ``None`` if no escalation.
    """
    if _RISK_ORDER.get(resolved_risk, 0) > _RISK_ORDER.get(base_risk, 0):
        return {
            "from": base_risk,
            "to": resolved_risk,
            "reason": (
                f"Your choices escalated the risk from {base_risk} to "
                f"{resolved_risk}. Please review the command carefully."
            ),
        }
    return None
