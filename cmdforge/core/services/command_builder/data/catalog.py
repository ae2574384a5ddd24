"""
L0 Data — Schema accessor over a validated catalogue.

The accessor is the only way the engine reaches command definitions.
It is built once and is read-only; the resolvers receive it as a
parameter so tests can hand in a catalogue of their own.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import Protocol

from cmdforge.core.models.command import Catalogue, Category, CommandDefinition


class SchemaAccessor(Protocol):
    """Anything that can look up a command definition by id."""

    def by_id(self, command_id: str) -> CommandDefinition | None: ...


class CommandCatalog:
    """Immutable id → CommandDefinition lookup."""

    def __init__(
        self,
        commands: Iterable[CommandDefinition],
        categories: Iterable[Category] = (),
        version: str = "1.0",
    ) -> None:
        self._commands = MappingProxyType({c.id: c for c in commands})
        self._categories = tuple(sorted(categories, key=lambda c: c.order))
        self.version = version

    @classmethod
    def from_catalogue(cls, catalogue: Catalogue) -> CommandCatalog:
        return cls(catalogue.commands, catalogue.categories, catalogue.version)

    @classmethod
    def from_dicts(cls, commands: Iterable[dict]) -> CommandCatalog:
        """Build from raw command dicts (validated on the way in)."""
        return cls(CommandDefinition.model_validate(c) for c in commands)

    def by_id(self, command_id: str) -> CommandDefinition | None:
        return self._commands.get(command_id)

    def ids(self) -> list[str]:
        return list(self._commands)

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._commands

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
