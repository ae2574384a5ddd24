"""
L2 Resolver — Chain resolution.

Resolves every item of a chain independently and joins the strings
with the declared shell operators. The chain is all-or-nothing: one
failing item and no pipeline string is produced.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cmdforge.core.models.command import ChainItem
from cmdforge.core.models.resolution import ChainResult
from cmdforge.core.services.command_builder.data.catalog import SchemaAccessor
from cmdforge.core.services.command_builder.domain.risk import _max_risk
from cmdforge.core.services.command_builder.resolver.command_resolution import resolve_command

logger = logging.getLogger(__name__)

DEFAULT_OPERATOR = "|"
"""Separator used when a non-first item declares none."""


def _as_item(item: ChainItem | dict) -> ChainItem:
    return item if isinstance(item, ChainItem) else ChainItem.model_validate(item)


def resolve_chain(
    catalog: SchemaAccessor,
    items: Sequence[ChainItem | dict],
) -> ChainResult:
    """Resolve an ordered chain of commands.

    Args:
        catalog: Schema accessor supplying command definitions.
        items: Non-empty sequence of ChainItem (or dicts with
            ``commandId``/``values``/``operator``).

    Returns:
        ChainResult. On failure ``command`` is ``None`` and ``errors``
        maps item index → that item's errors.

    Raises:
        ValueError: If ``items`` is empty.
    """
    if not items:
        raise ValueError("A chain needs at least one command.")

    chain = [_as_item(i) for i in items]
    result = ChainResult()

    for index, item in enumerate(chain):
        resolved = resolve_command(catalog, item.command_id, item.values)
        result.items.append(resolved)
        if resolved.errors:
            result.errors[index] = list(resolved.errors)
        result.warnings.extend(resolved.warnings)

    result.risk = _max_risk(r.risk for r in result.items)

    if result.errors:
        logger.debug("Chain failed at items %s", sorted(result.errors))
        return result

    parts: list[str] = []
    for index, (item, resolved) in enumerate(zip(chain, result.items)):
        if index > 0:
            operator = item.operator or DEFAULT_OPERATOR
            parts.append(operator)
            result.tokens.append(operator)
        parts.append(resolved.command)
        result.tokens.extend([*resolved.base.split(), *resolved.tokens])

    result.command = " ".join(parts)
    logger.debug("Chain of %d → %r", len(chain), result.command)
    return result
