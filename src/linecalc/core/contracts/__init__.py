"""Contracts — JSON Schema контракты входных документов linecalc."""

from .validators import (
    CALCULATOR_CONFIG_CONTRACT,
    CalculatorConfigValidator,
    ContractValidator,
    SchemaLoader,
    describe_violation,
    validate_calculator_config,
)

__all__ = [
    "CALCULATOR_CONFIG_CONTRACT",
    "SchemaLoader",
    "ContractValidator",
    "CalculatorConfigValidator",
    "describe_violation",
    "validate_calculator_config",
]
