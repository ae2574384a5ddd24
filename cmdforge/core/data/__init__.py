"""
Bundled catalogue data.

The package ships its default command catalogue as JSON under
``catalogs/``. ``DataRegistry`` reads each shipped file on first access
and keeps the raw dict for the rest of the process; the config loader
validates it into models.

Usage::

    from cmdforge.core.data import get_registry

    raw = get_registry().command_catalogue   # {"version", "categories", "commands"}
"""

from __future__ import annotations

import json
import logging
from functools import cached_property
from pathlib import Path

logger = logging.getLogger(__name__)

CATALOGS_DIR = Path(__file__).parent / "catalogs"

BUNDLED_CATALOGUE = CATALOGS_DIR / "commands.json"


def _read_catalog(path: Path) -> dict:
    """Read one shipped JSON file; a missing file yields an empty dict."""
    if not path.is_file():
        logger.warning("Bundled data file missing: %s", path)
        return {}
    return json.loads(path.read_text(encoding="utf-8"))


class DataRegistry:
    """Lazy, per-process cache of the shipped catalogs."""

    @cached_property
    def command_catalogue(self) -> dict:
        """The bundled command catalogue (133 tools, 14 categories)."""
        raw = _read_catalog(BUNDLED_CATALOGUE)
        logger.debug(
            "Read bundled catalogue: %d commands, %d categories",
            len(raw.get("commands", [])),
            len(raw.get("categories", [])),
        )
        return raw


_registry: DataRegistry | None = None


def get_registry() -> DataRegistry:
    """Shared DataRegistry, created on first use."""
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = DataRegistry()
    return _registry
