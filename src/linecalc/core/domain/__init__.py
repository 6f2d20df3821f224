"""
Domain models and value objects.

Contains the calculator operations, the diagnostics side channel and the
evaluation error taxonomy.
"""

from linecalc.core.domain.diagnostics import (
    CollectingReporter,
    DiagnosticReporter,
    EvaluationError,
    LoggingReporter,
    NullReporter,
)
from linecalc.core.domain.operation import (
    OPERATION_ARITY,
    OPERATOR_SYMBOLS,
    SET_KEYWORD,
    SQRT_KEYWORD,
    Operation,
    arity,
)

__all__ = [
    # Operations
    "OPERATION_ARITY",
    "OPERATOR_SYMBOLS",
    "SET_KEYWORD",
    "SQRT_KEYWORD",
    "Operation",
    "arity",
    # Diagnostics
    "CollectingReporter",
    "DiagnosticReporter",
    "EvaluationError",
    "LoggingReporter",
    "NullReporter",
]
