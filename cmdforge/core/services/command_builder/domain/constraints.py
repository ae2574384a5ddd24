"""
L1 Domain — Cross-argument constraints (pure).

``required`` / ``conflicts_with`` / ``depends_on`` form a small boolean
constraint graph per command. The graph is built from the definition
as explicit edges keyed by argument id, then walked against the set of
present arguments. Every violation is collected; nothing stops early.
No I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from cmdforge.core.models.command import CommandDefinition
from cmdforge.core.models.resolution import ErrorCode, ValidationError
from cmdforge.core.services.command_builder.domain.normalize import NormalizedValue


@dataclass(frozen=True)
class ConstraintGraph:
    """Constraint edges of one command.

    ``conflicts`` holds each unordered pair once, earlier-declared
    argument first, no matter which side (or both) declared it.
    """

    order: tuple[str, ...]
    required: frozenset[str]
    conflicts: tuple[tuple[str, str], ...]
    depends: dict[str, tuple[str, ...]]

    @classmethod
    def from_command(cls, command: CommandDefinition) -> ConstraintGraph:
        order = tuple(a.id for a in command.args)
        index = {arg_id: i for i, arg_id in enumerate(order)}

        pairs: set[tuple[str, str]] = set()
        for arg in command.args:
            for other in arg.conflicts_with:
                if other == arg.id:
                    continue
                a, b = sorted((arg.id, other), key=index.__getitem__)
                pairs.add((a, b))

        return cls(
            order=order,
            required=frozenset(a.id for a in command.args if a.required),
            conflicts=tuple(sorted(pairs, key=lambda p: (index[p[0]], index[p[1]]))),
            depends={a.id: a.depends_on for a in command.args if a.depends_on},
        )

    def violations(
        self,
        present: set[str],
        failed: set[str] | frozenset[str] = frozenset(),
    ) -> list[ValidationError]:
        """Walk the graph against the present set.

        Args:
            present: Argument ids that count as supplied.
            failed: Argument ids that already carry a local error; they
                are not reported again as missing.
        """
        errors: list[ValidationError] = []

        for arg_id in self.order:
            if arg_id in self.required and arg_id not in present and arg_id not in failed:
                errors.append(ValidationError(
                    code=ErrorCode.MISSING_REQUIRED,
                    message=f"'{arg_id}' is required",
                    arg_id=arg_id,
                ))

            if arg_id not in present:
                continue

            for a, b in self.conflicts:
                if a == arg_id and b in present:
                    errors.append(ValidationError(
                        code=ErrorCode.CONFLICTING_ARGUMENTS,
                        message=f"'{a}' cannot be combined with '{b}'",
                        arg_id=a,
                        other_id=b,
                    ))

            for dep in self.depends.get(arg_id, ()):
                if dep not in present:
                    errors.append(ValidationError(
                        code=ErrorCode.UNMET_DEPENDENCY,
                        message=f"'{arg_id}' requires '{dep}'",
                        arg_id=arg_id,
                        other_id=dep,
                    ))

        return errors


def validate_constraints(
    command: CommandDefinition,
    normalized: dict[str, NormalizedValue],
) -> list[ValidationError]:
    """Run both validation passes over one command instance.

    1. Local: re-surface normalization errors.
    2. Cross-argument: required, conflicts, dependencies.

    Returns:
        All violations, local ones first (empty = valid).
    """
    errors = [nv.error for nv in normalized.values() if nv.error is not None]

    present = {arg_id for arg_id, nv in normalized.items() if nv.present}
    failed = {arg_id for arg_id, nv in normalized.items() if nv.error is not None}

    errors.extend(ConstraintGraph.from_command(command).violations(present, failed))
    return [replace(e, command_id=command.id) for e in errors]
