"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from cmdforge.core.config.loader import parse_catalogue
from cmdforge.core.data import get_registry
from cmdforge.core.services.command_builder import CommandCatalog

_ENV_VARS = (
    "CMDFORGE_CATALOG",
    "CMDFORGE_LOG_LEVEL",
    "CMDFORGE_LOG_FILE",
    "CMDFORGE_LOG_FILE_LEVEL",
)

# A small hand-written catalogue covering every argument type and rule.
TOY_COMMANDS = [
    {
        "id": "toy",
        "base": "toy",
        "args": [
            {"id": "src", "type": "text", "positional": True, "position": 1, "required": True},
            {"id": "dst", "type": "text", "positional": True, "position": 2},
            {"id": "verbose", "type": "checkbox", "flag": "-v"},
            {"id": "level", "type": "number", "flag": "--level", "min": 1, "max": 9},
            {
                "id": "mode",
                "type": "select",
                "flag": "--mode",
                "options": [{"value": ""}, {"value": "fast"}, {"value": "safe"}],
            },
            {"id": "force", "type": "checkbox", "flag": "-f", "danger": True, "warning": "No undo"},
            {
                "id": "wipe",
                "type": "checkbox",
                "flag": "--wipe",
                "danger": True,
                "warning": "Erases data",
                "depends_on": ["force"],
            },
            {"id": "quiet", "type": "checkbox", "flag": "-q", "conflicts_with": ["verbose"]},
            {"id": "label", "type": "text", "flag": "--label"},
        ],
    },
    {
        "id": "sweep",
        "base": "sudo sweep",
        "danger_level": "caution",
        "args": [
            {"id": "target", "type": "text", "positional": True, "position": 1},
        ],
    },
]


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch):
    """Keep user catalogues and log settings out of every test."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(scope="session")
def catalog() -> CommandCatalog:
    """The bundled catalogue."""
    return CommandCatalog.from_catalogue(parse_catalogue(get_registry().command_catalogue))


@pytest.fixture
def toy_catalog() -> CommandCatalog:
    """A two-command catalogue for focused tests."""
    return CommandCatalog.from_dicts(TOY_COMMANDS)


@pytest.fixture
def toy(toy_catalog: CommandCatalog):
    """The ``toy`` command definition."""
    return toy_catalog.by_id("toy")
