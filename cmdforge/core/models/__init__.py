"""
Domain models — catalogue schema and resolution results.

All models are re-exported here for convenient access:

    from cmdforge.core.models import CommandDefinition, ChainItem, ResolvedCommand
"""

from cmdforge.core.models.command import (
    ArgOption,
    ArgumentSpec,
    Catalogue,
    Category,
    ChainItem,
    CommandDefinition,
    CommandExample,
)
from cmdforge.core.models.resolution import (
    ChainResult,
    ErrorCode,
    ResolvedCommand,
    ValidationError,
)

__all__ = [
    # command.py
    "ArgOption",
    "ArgumentSpec",
    "Catalogue",
    "Category",
    "ChainItem",
    "CommandDefinition",
    "CommandExample",
    # resolution.py
    "ChainResult",
    "ErrorCode",
    "ResolvedCommand",
    "ValidationError",
]
