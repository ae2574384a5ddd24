"""
L2 Resolver — Single command resolution.

Runs normalization, constraint validation, token assembly, and risk
assessment for one ``(command_id, values)`` pair and serializes the
result behind the command's base invocation.
"""

from __future__ import annotations

import logging
from typing import Any

from cmdforge.core.models.resolution import ErrorCode, ResolvedCommand, ValidationError
from cmdforge.core.services.command_builder.data.catalog import SchemaAccessor
from cmdforge.core.services.command_builder.domain.constraints import validate_constraints
from cmdforge.core.services.command_builder.domain.normalize import normalize_values
from cmdforge.core.services.command_builder.domain.risk import (
    _check_risk_escalation,
    assess_risk,
)
from cmdforge.core.services.command_builder.domain.tokens import assemble_tokens

logger = logging.getLogger(__name__)


def serialize_command(base: str, tokens: list[str]) -> str:
    """Join the base invocation and tokens with single spaces."""
    return " ".join([base.strip(), *tokens]).strip()


def unknown_command(command_id: str) -> ResolvedCommand:
    """Result for an id the accessor does not know."""
    return ResolvedCommand(
        command_id=command_id,
        errors=[ValidationError(
            code=ErrorCode.UNKNOWN_COMMAND,
            message=f"No command '{command_id}' in the catalogue.",
            command_id=command_id,
        )],
    )


def resolve_command(
    catalog: SchemaAccessor,
    command_id: str,
    values: dict[str, Any] | None = None,
) -> ResolvedCommand:
    """Resolve one command instance.

    Args:
        catalog: Schema accessor supplying the command definition.
        command_id: Catalogue id (e.g. ``"docker-run"``).
        values: Raw argument values keyed by argument id.

    Returns:
        ResolvedCommand. ``errors`` holds every problem found; tokens
        and the command string are filled in either way.
    """
    command = catalog.by_id(command_id)
    if command is None:
        logger.debug("Unknown command: %s", command_id)
        return unknown_command(command_id)

    normalized = normalize_values(command, values or {})
    errors = validate_constraints(command, normalized)

    assembled = assemble_tokens(command, normalized)
    errors.extend(assembled.errors)

    risk = assess_risk(command, normalized)
    tokens = assembled.tokens

    resolved = ResolvedCommand(
        command_id=command.id,
        base=command.base.strip(),
        tokens=tokens,
        command=serialize_command(command.base, tokens),
        errors=errors,
        risk=risk.level,
        warnings=risk.warnings,
        escalation=_check_risk_escalation(command.danger_level, risk.level),
        present=[arg_id for arg_id, nv in normalized.items() if nv.present],
    )

    logger.debug(
        "Resolved %s → %r (%d errors, risk=%s)",
        command.id, resolved.command, len(errors), resolved.risk,
    )
    return resolved
