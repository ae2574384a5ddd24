"""
Build use case — resolve a command or a chain against the configured catalogue.

Thin layer between the CLI and the command builder: loads the catalogue,
parses user-supplied inputs, and turns configuration failures into a
result object instead of an exception.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from cmdforge.core.config.loader import ConfigError, load_catalog
from cmdforge.core.models.command import CommandDefinition
from cmdforge.core.models.resolution import ChainResult, ResolvedCommand
from cmdforge.core.services.command_builder import resolve_chain, resolve_command

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of building one command."""

    resolved: ResolvedCommand | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        assert self.resolved is not None
        return self.resolved.to_dict()


@dataclass
class ChainBuildResult:
    """Result of building a chain."""

    chain: ChainResult | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        assert self.chain is not None
        return self.chain.to_dict()


def parse_assignments(
    pairs: tuple[str, ...] | list[str],
    command: CommandDefinition | None = None,
) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` strings into a ValueAssignment.

    A bare ``KEY`` sets a checkbox (``True``). Only the first ``=``
    splits, so values may contain ``=`` themselves.

    Raises:
        ValueError: If ``command`` is given and a bare ``KEY`` names one of
            its arguments that is not a checkbox.
    """
    values: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not key:
            continue
        if sep:
            values[key] = value
            continue
        arg = command.get_arg(key) if command is not None else None
        if arg is not None and arg.type != "checkbox":
            raise ValueError(f"'{key}' is a {arg.type} argument and needs a value: -s {key}=VALUE")
        values[key] = True
    return values


def build_command(
    command_id: str,
    values: dict[str, Any] | None = None,
    catalog_path: Path | None = None,
    assignments: tuple[str, ...] | list[str] = (),
) -> BuildResult:
    """Resolve one command from the configured catalogue.

    ``assignments`` are raw ``KEY[=VALUE]`` strings, parsed against the
    command's arguments and merged over ``values``.
    """
    try:
        catalog = load_catalog(catalog_path)
    except ConfigError as e:
        return BuildResult(error=str(e))

    merged = dict(values or {})
    try:
        merged.update(parse_assignments(assignments, catalog.by_id(command_id)))
    except ValueError as e:
        return BuildResult(error=str(e))

    return BuildResult(resolved=resolve_command(catalog, command_id, merged))


def load_chain_file(path: Path) -> list[dict]:
    """Read a chain definition (YAML or JSON list of items).

    Raises:
        ConfigError: If the file is missing or not a list of mappings.
    """
    if not path.is_file():
        raise ConfigError(f"Chain file not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
        data = json.loads(raw) if path.suffix.lower() == ".json" else yaml.safe_load(raw)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read chain file {path}: {e}") from e

    if isinstance(data, dict) and "chain" in data:
        data = data["chain"]

    if not isinstance(data, list) or not all(isinstance(i, dict) for i in data):
        raise ConfigError(f"Expected a list of chain items in {path}")

    return data


def build_chain(
    chain_path: Path,
    catalog_path: Path | None = None,
) -> ChainBuildResult:
    """Resolve a chain file against the configured catalogue."""
    try:
        catalog = load_catalog(catalog_path)
        items = load_chain_file(chain_path)
    except ConfigError as e:
        return ChainBuildResult(error=str(e))

    if not items:
        return ChainBuildResult(error=f"Chain file {chain_path} has no items.")

    try:
        chain = resolve_chain(catalog, items)
    except ValueError as e:
        # also catches pydantic validation of item shape and operator
        return ChainBuildResult(error=f"Invalid chain item: {e}")

    logger.info("Built chain of %d items from %s", len(items), chain_path)
    return ChainBuildResult(chain=chain)
