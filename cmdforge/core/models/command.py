"""
Command catalogue models — the read-only schema of every known tool.

A catalogue is loaded once per process (bundled JSON or a user file)
and never mutated afterwards. Everything the engine knows about a
command comes from these models: how each argument is placed
(flag or position), what values it accepts, and which other
arguments it requires or excludes.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ArgType = Literal["text", "checkbox", "number", "select"]
RiskLevel = Literal["none", "caution", "dangerous"]
ChainOperator = Literal["|", "&&", "||", ";"]


class ArgOption(BaseModel):
    """One allowed value of a ``select`` argument."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str = ""


class ArgumentSpec(BaseModel):
    """Schema for one argument, flag, or positional slot of a command.

    Placement is decided by ``flag`` or by ``positional``/``position``,
    never both. An argument with neither is validated but not rendered.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    type: ArgType = "text"

    # ── Placement ────────────────────────────────────────────────
    flag: str | None = None          # "-l", "--name", "-type=", or bare "-"
    positional: bool = False
    position: int | None = None      # 1-based rank among positionals

    # ── Value rules ──────────────────────────────────────────────
    required: bool = False
    default: Any = None
    options: tuple[ArgOption, ...] = ()
    min: float | None = None
    max: float | None = None
    quote: bool | None = None        # None = infer from the argument id

    # ── Cross-argument rules ─────────────────────────────────────
    depends_on: tuple[str, ...] = ()
    conflicts_with: tuple[str, ...] = ()

    # ── Risk ─────────────────────────────────────────────────────
    danger: bool = False
    warning: str | None = None

    # ── Display metadata (carried through unchanged) ─────────────
    placeholder: str = ""
    description: str = ""
    group: str = ""

    @model_validator(mode="after")
    def _check_placement(self) -> ArgumentSpec:
        if self.flag is not None and self.positional:
            raise ValueError(f"argument '{self.id}' sets both flag and positional")
        if self.positional and (self.position is None or self.position < 1):
            raise ValueError(f"positional argument '{self.id}' needs a position >= 1")
        return self

    @property
    def is_flagged(self) -> bool:
        return self.flag is not None

    @property
    def is_positional(self) -> bool:
        return self.positional and self.position is not None

    @property
    def is_switch(self) -> bool:
        """A flag that renders alone, without a value token."""
        return self.is_flagged and self.type == "checkbox"

    @property
    def option_values(self) -> list[str]:
        return [o.value for o in self.options]


class CommandExample(BaseModel):
    """A worked example recorded in the catalogue."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    values: dict[str, Any] = Field(default_factory=dict)
    output: str


class CommandDefinition(BaseModel):
    """A tool the engine can build invocations for.

    ``args`` order is significant: it is the emission order of flags
    inside each flag group.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    base: str                         # literal invocation prefix, e.g. "sudo apt"
    name: str = ""
    category: str = ""
    os: tuple[str, ...] = ()
    description: str = ""
    difficulty: str | None = None
    danger_level: RiskLevel = "none"
    positionals_first: bool = False   # e.g. find: paths precede the expression
    tags: tuple[str, ...] = ()
    args: tuple[ArgumentSpec, ...] = ()
    examples: tuple[CommandExample, ...] = ()

    @field_validator("danger_level", mode="before")
    @classmethod
    def _default_danger_level(cls, value: Any) -> Any:
        return "none" if value is None else value

    @model_validator(mode="after")
    def _check_arguments(self) -> CommandDefinition:
        ids = [a.id for a in self.args]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"command '{self.id}' has duplicate argument ids: {', '.join(dupes)}")

        positions = [a.position for a in self.args if a.is_positional]
        taken = sorted({p for p in positions if positions.count(p) > 1})
        if taken:
            raise ValueError(
                f"command '{self.id}' reuses positional ranks: {', '.join(map(str, taken))}"
            )

        known = set(ids)
        for arg in self.args:
            for ref in (*arg.depends_on, *arg.conflicts_with):
                if ref not in known:
                    raise ValueError(
                        f"command '{self.id}': argument '{arg.id}' references unknown argument '{ref}'"
                    )
        return self

    def get_arg(self, arg_id: str) -> ArgumentSpec | None:
        """Look up an argument by id."""
        for arg in self.args:
            if arg.id == arg_id:
                return arg
        return None

    @property
    def positionals(self) -> list[ArgumentSpec]:
        """Positional arguments in ascending position order."""
        return sorted((a for a in self.args if a.is_positional), key=lambda a: a.position or 0)


class Category(BaseModel):
    """Display grouping for commands (browsing happens outside the engine)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str = ""
    description: str = ""
    order: int = 0


class Catalogue(BaseModel):
    """On-disk shape of a command catalogue file."""

    version: str = "1.0"
    categories: list[Category] = Field(default_factory=list)
    commands: list[CommandDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> Catalogue:
        ids = [c.id for c in self.commands]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"duplicate command ids: {', '.join(dupes)}")
        return self


class ChainItem(BaseModel):
    """One step of a command chain.

    ``operator`` is the separator placed *before* this item; it is
    ignored on the first item of a chain.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    command_id: str = Field(alias="commandId")
    values: dict[str, Any] = Field(default_factory=dict)
    operator: ChainOperator | None = None
