"""
Тесты для Arithmetic — применение операций к аккумулятору

Проверяемые инварианты:
1. DIV/REM на точный ноль → ArithmeticDomainViolation
2. SQRT от неположительного значения → значение без изменений
3. REM: знак результата совпадает со знаком делимого (fmod)
4. POW: IEEE-семантика вместо исключений (NaN, ±inf)
5. Детерминизм
"""

import math

import pytest

from linecalc.core.domain import Operation
from linecalc.core.math import (
    ArithmeticDomainViolation,
    apply_binary,
    apply_unary,
    format_number,
    safe_fmod,
    safe_pow,
)


# =============================================================================
# ТЕСТЫ: Унарные операции
# =============================================================================


class TestApplyUnary:
    """Тесты apply_unary."""

    def test_negate(self):
        assert apply_unary(Operation.NEG, 4.0).value == -4.0
        assert apply_unary(Operation.NEG, -4.0).value == 4.0

    def test_negate_always_applied(self):
        outcome = apply_unary(Operation.NEG, 0.0)
        assert outcome.applied
        assert outcome.message is None

    def test_sqrt_positive(self):
        outcome = apply_unary(Operation.SQRT, 9.0)
        assert outcome.value == 3.0
        assert outcome.applied

    @pytest.mark.parametrize("value", [-9.0, 0.0, -0.5])
    def test_sqrt_non_positive_unchanged(self, value):
        """SQRT от значения <= 0 — без изменений, с сообщением."""
        outcome = apply_unary(Operation.SQRT, value)
        assert outcome.value == value
        assert not outcome.applied
        assert outcome.message.startswith("Bad argument for SQRT")

    def test_sqrt_message(self):
        assert apply_unary(Operation.SQRT, -9.0).message == "Bad argument for SQRT: -9"

    def test_sqrt_nan_unchanged(self):
        outcome = apply_unary(Operation.SQRT, math.nan)
        assert math.isnan(outcome.value)
        assert not outcome.applied

    def test_binary_operation_rejected(self):
        with pytest.raises(ValueError):
            apply_unary(Operation.ADD, 1.0)


# =============================================================================
# ТЕСТЫ: Бинарные операции
# =============================================================================


class TestApplyBinary:
    """Тесты apply_binary."""

    def test_set_ignores_accumulator(self):
        assert apply_binary(Operation.SET, 100.0, 5.0) == 5.0

    def test_basic_arithmetic(self):
        assert apply_binary(Operation.ADD, 2.0, 3.0) == 5.0
        assert apply_binary(Operation.SUB, 2.0, 3.0) == -1.0
        assert apply_binary(Operation.MUL, 2.0, 3.0) == 6.0
        assert apply_binary(Operation.DIV, 10.0, 4.0) == 2.5

    def test_remainder_follows_dividend_sign(self):
        """fmod: знак результата — знак делимого."""
        assert apply_binary(Operation.REM, 7.0, 3.0) == 1.0
        assert apply_binary(Operation.REM, -7.0, 3.0) == -1.0
        assert apply_binary(Operation.REM, 5.5, 2.0) == 1.5

    @pytest.mark.parametrize("operation", [Operation.DIV, Operation.REM])
    def test_zero_divisor_raises(self, operation):
        with pytest.raises(ArithmeticDomainViolation) as exc_info:
            apply_binary(operation, 1.0, 0.0)
        assert exc_info.value.operation == operation
        assert exc_info.value.right == 0.0

    def test_zero_divisor_messages(self):
        with pytest.raises(ArithmeticDomainViolation, match="Bad right argument for division: 0"):
            apply_binary(Operation.DIV, 1.0, 0.0)
        with pytest.raises(ArithmeticDomainViolation, match="Bad right argument for remainder: 0"):
            apply_binary(Operation.REM, 1.0, 0.0)

    def test_domain_violation_is_value_error(self):
        with pytest.raises(ValueError):
            apply_binary(Operation.DIV, 1.0, 0.0)

    def test_power(self):
        assert apply_binary(Operation.POW, 3.0, 2.0) == 9.0
        assert apply_binary(Operation.POW, 4.0, 0.5) == 2.0

    def test_unary_operation_rejected(self):
        with pytest.raises(ValueError):
            apply_binary(Operation.NEG, 1.0, 2.0)

    def test_deterministic(self):
        results = {apply_binary(Operation.DIV, 1.0, 3.0) for _ in range(100)}
        assert len(results) == 1


# =============================================================================
# ТЕСТЫ: IEEE-семантика
# =============================================================================


class TestFloatingEdgeCases:
    """Тесты safe_pow / safe_fmod."""

    def test_negative_base_fractional_exponent_is_nan(self):
        assert math.isnan(safe_pow(-8.0, 0.5))

    def test_overflow_is_inf(self):
        assert safe_pow(10.0, 400.0) == math.inf
        assert safe_pow(-10.0, 401.0) == -math.inf
        assert safe_pow(-10.0, 400.0) == math.inf

    def test_zero_negative_exponent(self):
        assert safe_pow(0.0, -1.0) == math.inf
        assert safe_pow(-0.0, -1.0) == -math.inf
        assert safe_pow(-0.0, -2.0) == math.inf

    def test_fmod_infinite_dividend_is_nan(self):
        assert math.isnan(safe_fmod(math.inf, 2.0))

    def test_fmod_regular(self):
        assert safe_fmod(7.0, 3.0) == 1.0


# =============================================================================
# ТЕСТЫ: Форматирование
# =============================================================================


class TestFormatNumber:
    """Тесты format_number."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (5.0, "5"),
            (-4.0, "-4"),
            (2.5, "2.5"),
            (0.1, "0.1"),
            (math.inf, "inf"),
            (1e20, "1e+20"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected

    def test_nan(self):
        assert format_number(math.nan) == "nan"
