"""
L0 Data — Catalogue lint.

Hard invariants (unique ids, placement, references) are enforced by the
pydantic models at load time. This module reports the softer problems
that do not stop a command from resolving but usually point at a
catalogue typo: arguments that can never be rendered, select arguments
with nothing to select, inverted numeric bounds.
"""

from __future__ import annotations

import logging

from cmdforge.core.models.command import ArgumentSpec, CommandDefinition
from cmdforge.core.services.command_builder.data.catalog import CommandCatalog

logger = logging.getLogger(__name__)


def _lint_argument(arg: ArgumentSpec) -> list[str]:
    issues: list[str] = []

    if not arg.is_flagged and not arg.is_positional:
        issues.append(f"argument '{arg.id}' has neither flag nor position and is never rendered")

    if arg.type == "select" and not arg.options:
        issues.append(f"select argument '{arg.id}' has no options")

    if arg.type != "select" and arg.options:
        issues.append(f"argument '{arg.id}' declares options but is of type {arg.type}")

    if arg.min is not None and arg.max is not None and arg.min > arg.max:
        issues.append(f"argument '{arg.id}' has min {arg.min} greater than max {arg.max}")

    if arg.type == "checkbox" and arg.is_positional:
        issues.append(f"checkbox argument '{arg.id}' is positional and would render its value")

    if arg.id in arg.conflicts_with or arg.id in arg.depends_on:
        issues.append(f"argument '{arg.id}' refers to itself")

    return issues


def lint_command(command: CommandDefinition) -> list[str]:
    """Return lint findings for one command (empty = clean)."""
    issues: list[str] = []

    if not command.base.strip():
        issues.append("empty base invocation")

    for arg in command.args:
        issues.extend(_lint_argument(arg))

    return issues


def lint_catalog(catalog: CommandCatalog) -> dict[str, list[str]]:
    """Lint every command in the catalogue.

    Returns:
        Dict mapping command id → findings. Only commands with findings
        are included.
    """
    findings: dict[str, list[str]] = {}
    for command in catalog:
        issues = lint_command(command)
        if issues:
            findings[command.id] = issues
    if findings:
        logger.debug("Catalogue lint: %d commands with findings", len(findings))
    return findings
