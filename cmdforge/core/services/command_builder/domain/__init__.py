"""
L1 Domain — ``__init__.py`` re-exports all pure domain functions.

These functions have NO filesystem access and NO subprocess calls.
Pure input→output.
"""

from cmdforge.core.services.command_builder.domain.constraints import (  # noqa: F401
    ConstraintGraph,
    validate_constraints,
)
from cmdforge.core.services.command_builder.domain.normalize import (  # noqa: F401
    NormalizedValue,
    normalize_value,
    normalize_values,
)
from cmdforge.core.services.command_builder.domain.quoting import (  # noqa: F401
    FREE_FORM_ARG_IDS,
    is_free_form,
    needs_quoting,
    render_value,
    shell_quote,
)
from cmdforge.core.services.command_builder.domain.risk import (  # noqa: F401
    _RISK_ORDER,
    RiskAssessment,
    _check_risk_escalation,
    _max_risk,
    assess_risk,
)
from cmdforge.core.services.command_builder.domain.tokens import (  # noqa: F401
    AssembledTokens,
    assemble_tokens,
    render_flag,
)
