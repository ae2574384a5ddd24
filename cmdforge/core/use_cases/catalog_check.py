"""
Catalogue check use case — validate a catalogue and report issues.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from cmdforge.core.config.loader import ConfigError, load_catalog, resolve_catalog_path
from cmdforge.core.services.command_builder import (
    CommandCatalog,
    lint_catalog,
    resolve_command,
)

logger = logging.getLogger(__name__)


@dataclass
class ExampleMismatch:
    """A catalogue example whose resolved string differs from the recorded one."""

    command_id: str
    name: str
    expected: str
    actual: str
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "command": self.command_id,
            "name": self.name,
            "expected": self.expected,
            "actual": self.actual,
            "errors": self.errors,
        }


@dataclass
class CatalogCheckResult:
    """Result of catalogue validation."""

    valid: bool = False
    catalog_path: Path | None = None
    command_count: int = 0
    example_count: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    mismatches: list[ExampleMismatch] = field(default_factory=list)

    @property
    def examples_passed(self) -> int:
        return self.example_count - len(self.mismatches)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "catalog_path": str(self.catalog_path) if self.catalog_path else None,
            "command_count": self.command_count,
            "example_count": self.example_count,
            "examples_passed": self.examples_passed,
            "errors": self.errors,
            "warnings": self.warnings,
            "mismatches": [m.to_dict() for m in self.mismatches],
        }


def replay_examples(catalog: CommandCatalog) -> tuple[int, list[ExampleMismatch]]:
    """Resolve every catalogue example and compare with its recorded output.

    Returns:
        (number of examples replayed, mismatches)
    """
    count = 0
    mismatches: list[ExampleMismatch] = []
    for command in catalog:
        for example in command.examples:
            count += 1
            resolved = resolve_command(catalog, command.id, example.values)
            if resolved.command != example.output or resolved.errors:
                mismatches.append(ExampleMismatch(
                    command_id=command.id,
                    name=example.name,
                    expected=example.output,
                    actual=resolved.command,
                    errors=[e.message for e in resolved.errors],
                ))
    return count, mismatches


def check_catalog(catalog_path: Path | None = None) -> CatalogCheckResult:
    """Validate the configured catalogue and lint it.

    Hard schema violations are errors; lint findings and example
    mismatches are warnings.
    """
    result = CatalogCheckResult(catalog_path=resolve_catalog_path(catalog_path))

    try:
        catalog = load_catalog(result.catalog_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.command_count = len(catalog)

    if not len(catalog):
        result.warnings.append("Catalogue defines no commands.")

    known_categories = {c.id for c in catalog.categories}
    for command in catalog:
        if known_categories and command.category and command.category not in known_categories:
            result.warnings.append(f"{command.id}: unknown category '{command.category}'")

    for command_id, issues in sorted(lint_catalog(catalog).items()):
        for issue in issues:
            result.warnings.append(f"{command_id}: {issue}")

    result.example_count, result.mismatches = replay_examples(catalog)
    for m in result.mismatches:
        result.warnings.append(
            f"{m.command_id}: example '{m.name}' resolves to {m.actual!r}, catalogue says {m.expected!r}"
        )

    logger.info(
        "Catalogue check: %d commands, %d/%d examples match, %d warnings",
        result.command_count, result.examples_passed, result.example_count, len(result.warnings),
    )

    result.valid = not result.errors
    return result
