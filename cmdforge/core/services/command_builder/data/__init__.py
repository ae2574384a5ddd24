"""
L0 Data — catalogue access and lint.
"""

from cmdforge.core.services.command_builder.data.catalog import (  # noqa: F401
    CommandCatalog,
    SchemaAccessor,
)
from cmdforge.core.services.command_builder.data.catalog_schema import (  # noqa: F401
    lint_catalog,
    lint_command,
)
