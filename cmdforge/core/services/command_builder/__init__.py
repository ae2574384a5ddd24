"""
Command builder service — package re-exports.

Callers import from here::

    from cmdforge.core.services.command_builder import resolve_command

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → domain → resolver).
"""

# ── L0: Data ──
from cmdforge.core.services.command_builder.data.catalog import (  # noqa: F401
    CommandCatalog,
    SchemaAccessor,
)
from cmdforge.core.services.command_builder.data.catalog_schema import (  # noqa: F401
    lint_catalog,
    lint_command,
)

# ── L2: Resolver ──
from cmdforge.core.services.command_builder.resolver.chain_resolution import (  # noqa: F401
    resolve_chain,
)
from cmdforge.core.services.command_builder.resolver.command_resolution import (  # noqa: F401
    resolve_command,
)
