"""
L2 Resolver — ``__init__.py`` re-exports all resolver functions.
"""

from cmdforge.core.services.command_builder.resolver.chain_resolution import (  # noqa: F401
    DEFAULT_OPERATOR,
    resolve_chain,
)
from cmdforge.core.services.command_builder.resolver.command_resolution import (  # noqa: F401
    resolve_command,
    serialize_command,
    unknown_command,
)
