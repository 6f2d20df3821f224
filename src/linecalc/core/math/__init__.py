"""
Core math modules для linecalc

Применение унарных и бинарных операций к аккумулятору с domain-защитами.
"""

from linecalc.core.math.arithmetic import (
    ZERO_DIVISOR,
    ArithmeticDomainViolation,
    UnaryOutcome,
    apply_binary,
    apply_unary,
    format_number,
    safe_fmod,
    safe_pow,
)

__all__ = [
    # Constants
    "ZERO_DIVISOR",
    # Exceptions
    "ArithmeticDomainViolation",
    # Types
    "UnaryOutcome",
    # Functions
    "apply_binary",
    "apply_unary",
    "format_number",
    "safe_fmod",
    "safe_pow",
]
