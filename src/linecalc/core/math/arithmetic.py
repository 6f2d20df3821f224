"""
Arithmetic — применение операций к аккумулятору

Модуль выполняет унарные и бинарные операции над float-аккумулятором:
- NEG / SQRT (унарные)
- SET / ADD / SUB / MUL / DIV / REM / POW (бинарные)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление и остаток на точный ноль никогда не выполняются
   (ArithmeticDomainViolation, вызывающий сохраняет аккумулятор)
2. SQRT от неположительного значения не является ошибкой вызова:
   возвращается исходное значение (outcome, а не exception)
3. POW не валидируется: результат соответствует IEEE pow
   (NaN для отрицательного основания с дробной степенью, ±inf при переполнении)
4. REM следует семантике fmod: знак результата совпадает со знаком делимого
"""

import math
from typing import Final, NamedTuple

from linecalc.core.domain.operation import Operation


# =============================================================================
# CONSTANTS
# =============================================================================

# Точный ноль делителя (сравнение без epsilon)
ZERO_DIVISOR: Final[float] = 0.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArithmeticDomainViolation(ValueError):
    """
    Нарушение domain бинарной операции: DIV или REM с правым операндом 0.

    Обрабатывается в LineEvaluator: диагностика + неизменённый аккумулятор.
    """

    def __init__(self, operation: Operation, right: float):
        self.operation = operation
        self.right = right
        name = "division" if operation is Operation.DIV else "remainder"
        super().__init__(f"Bad right argument for {name}: {format_number(right)}")


# =============================================================================
# RESULT
# =============================================================================


class UnaryOutcome(NamedTuple):
    """Результат унарной операции."""

    value: float
    applied: bool
    message: str | None = None


# =============================================================================
# FORMATTING
# =============================================================================


def format_number(value: float) -> str:
    """
    Компактное представление float для диагностики и вывода.

    Целые значения печатаются без дробной части, остальные — через repr.

    Examples:
        >>> format_number(5.0)
        '5'
        >>> format_number(-0.25)
        '-0.25'
        >>> format_number(float('nan'))
        'nan'
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


# =============================================================================
# UNARY
# =============================================================================


def apply_unary(operation: Operation, current: float) -> UnaryOutcome:
    """
    Применение унарной операции к аккумулятору.

    Args:
        operation: NEG или SQRT
        current: Текущее значение аккумулятора

    Returns:
        UnaryOutcome:
        - NEG: -current, applied=True
        - SQRT: sqrt(current) если current > 0, иначе current
          и сообщение "Bad argument for SQRT"

    Raises:
        ValueError: Если операция не унарная

    Examples:
        >>> apply_unary(Operation.NEG, 4.0).value
        -4.0
        >>> apply_unary(Operation.SQRT, 9.0).value
        3.0
        >>> apply_unary(Operation.SQRT, -9.0).applied
        False
    """
    if operation is Operation.NEG:
        return UnaryOutcome(-current, True)

    if operation is Operation.SQRT:
        # NaN тоже не проходит сравнение и остаётся без изменений
        if current > 0:
            return UnaryOutcome(math.sqrt(current), True)
        return UnaryOutcome(
            current, False, f"Bad argument for SQRT: {format_number(current)}"
        )

    raise ValueError(f"Operation {operation.value} is not unary")


# =============================================================================
# BINARY
# =============================================================================


def safe_pow(left: float, right: float) -> float:
    """
    Возведение в степень с IEEE-семантикой вместо исключений.

    math.pow бросает ValueError/OverflowError там, где C pow возвращает
    NaN или inf; здесь возвращается значение.

    Examples:
        >>> safe_pow(2.0, 10.0)
        1024.0
        >>> math.isnan(safe_pow(-8.0, 0.5))
        True
        >>> safe_pow(10.0, 400.0)
        inf
    """
    try:
        return math.pow(left, right)
    except ValueError:
        # 0 ** отрицательная степень → inf (с сохранением знака нуля)
        if left == 0.0 and right < 0:
            odd_integer = right.is_integer() and int(right) % 2 == 1
            return math.copysign(math.inf, left) if odd_integer else math.inf
        return math.nan
    except OverflowError:
        odd_integer = right.is_integer() and int(right) % 2 == 1
        if left < 0 and odd_integer:
            return -math.inf
        return math.inf


def safe_fmod(left: float, right: float) -> float:
    """
    Остаток от деления по семантике fmod (знак делимого).

    Для бесконечного делимого возвращает NaN вместо ValueError.

    Examples:
        >>> safe_fmod(7.0, 3.0)
        1.0
        >>> safe_fmod(-7.0, 3.0)
        -1.0
    """
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


def apply_binary(operation: Operation, left: float, right: float) -> float:
    """
    Применение бинарной операции (left — аккумулятор, right — операнд).

    Args:
        operation: Бинарная операция
        left: Текущее значение аккумулятора
        right: Разобранный операнд

    Returns:
        Новое значение аккумулятора

    Raises:
        ArithmeticDomainViolation: DIV/REM с right == 0.0
        ValueError: Если операция не бинарная

    Examples:
        >>> apply_binary(Operation.ADD, 2.0, 3.0)
        5.0
        >>> apply_binary(Operation.SET, 100.0, 5.0)
        5.0
        >>> apply_binary(Operation.REM, -7.0, 2.0)
        -1.0
    """
    if operation is Operation.SET:
        return right
    if operation is Operation.ADD:
        return left + right
    if operation is Operation.SUB:
        return left - right
    if operation is Operation.MUL:
        return left * right

    if operation in (Operation.DIV, Operation.REM):
        if right == ZERO_DIVISOR:
            raise ArithmeticDomainViolation(operation, right)
        if operation is Operation.DIV:
            return left / right
        return safe_fmod(left, right)

    if operation is Operation.POW:
        return safe_pow(left, right)

    raise ValueError(f"Operation {operation.value} is not binary")
