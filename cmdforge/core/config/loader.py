"""
Configuration loader — reads a command catalogue into the schema accessor.

This is the primary entry point for getting a catalogue. It finds the
catalogue file, reads YAML or JSON, validates against the pydantic
schema, and returns a read-only CommandCatalog. With no user file the
bundled catalogue is used.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from cmdforge.core.data import get_registry
from cmdforge.core.models.command import Catalogue
from cmdforge.core.services.command_builder.data.catalog import CommandCatalog

logger = logging.getLogger(__name__)

# Default catalogue filename looked up from the working directory
CATALOG_CONFIG_FILE = "commands.yml"

# Environment override for the catalogue path
CATALOG_ENV_VAR = "CMDFORGE_CATALOG"


class ConfigError(Exception):
    """Raised when the catalogue is invalid or missing."""


def find_catalog_file(start_dir: Path | None = None) -> Path | None:
    """Search for commands.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to commands.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CATALOG_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def resolve_catalog_path(path: Path | None = None) -> Path | None:
    """Pick the catalogue file: explicit > env var > discovered > None (bundled)."""
    if path is not None:
        return path
    env_path = os.environ.get(CATALOG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return find_catalog_file()


def _parse(path: Path, raw: str) -> object:
    if path.suffix.lower() == ".json":
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def parse_catalogue(data: object, source: str = "catalogue") -> Catalogue:
    """Validate raw catalogue data.

    A bare list is accepted as the ``commands`` list.

    Raises:
        ConfigError: If the data does not match the catalogue schema.
    """
    if isinstance(data, list):
        data = {"commands": data}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {source}, got {type(data).__name__}")

    try:
        return Catalogue.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid command catalogue in {source}: {e}") from e


def load_catalog(path: Path | None = None) -> CommandCatalog:
    """Load and validate the command catalogue.

    Args:
        path: Explicit catalogue file. If None, the env var and an
            upward search are tried before falling back to the
            bundled catalogue.

    Returns:
        Read-only CommandCatalog.

    Raises:
        ConfigError: If a catalogue file is missing or invalid.
    """
    path = resolve_catalog_path(path)

    if path is None:
        catalogue = parse_catalogue(get_registry().command_catalogue, source="bundled catalogue")
        logger.info("Loaded bundled catalogue with %d commands", len(catalogue.commands))
        return CommandCatalog.from_catalogue(catalogue)

    if not path.is_file():
        raise ConfigError(f"Catalogue file not found: {path}")

    logger.debug("Loading catalogue from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    catalogue = parse_catalogue(_parse(path, raw), source=str(path))
    logger.info("Loaded catalogue '%s' with %d commands", path, len(catalogue.commands))
    return CommandCatalog.from_catalogue(catalogue)
