"""
Operation — операции калькулятора и их арность

Закрытое множество операций, которые может запросить строка ввода.
Операция выводится заново для каждой строки и никогда не хранится.

Арность:
- ERROR: 0 (операция не распознана)
- NEG, SQRT: 1 (унарные, работают только с аккумулятором)
- SET, ADD, SUB, MUL, DIV, REM, POW: 2 (аккумулятор + операнд)
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Операция, распознанная в начале строки"""

    ERROR = "ERROR"
    SET = "SET"
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    REM = "REM"
    NEG = "NEG"
    POW = "POW"
    SQRT = "SQRT"

    @property
    def arity(self) -> int:
        """Количество операндов операции (0 для ERROR)."""
        return OPERATION_ARITY[self]

    @property
    def is_unary(self) -> bool:
        return self.arity == 1

    @property
    def is_binary(self) -> bool:
        return self.arity == 2

    @property
    def foldable(self) -> bool:
        """Можно ли применять операцию в режиме left-fold.

        Только бинарные операции, кроме SET: SET игнорирует аккумулятор,
        свёртка по нему не имеет смысла.
        """
        return self.is_binary and self is not Operation.SET


# =============================================================================
# CONSTANTS
# =============================================================================

OPERATION_ARITY: Final[dict[Operation, int]] = {
    # error
    Operation.ERROR: 0,
    # unary
    Operation.NEG: 1,
    Operation.SQRT: 1,
    # binary
    Operation.SET: 2,
    Operation.ADD: 2,
    Operation.SUB: 2,
    Operation.MUL: 2,
    Operation.DIV: 2,
    Operation.REM: 2,
    Operation.POW: 2,
}

# Односимвольные операторы
OPERATOR_SYMBOLS: Final[dict[str, Operation]] = {
    "+": Operation.ADD,
    "-": Operation.SUB,
    "*": Operation.MUL,
    "/": Operation.DIV,
    "%": Operation.REM,
    "_": Operation.NEG,
    "^": Operation.POW,
}

# Многосимвольные ключевые слова (сопоставляются посимвольно)
SQRT_KEYWORD: Final[str] = "SQRT"
SET_KEYWORD: Final[str] = "SET"


def arity(operation: Operation) -> int:
    """
    Арность операции.

    Args:
        operation: Операция

    Returns:
        0 для ERROR, 1 для унарных, 2 для бинарных

    Examples:
        >>> arity(Operation.NEG)
        1
        >>> arity(Operation.POW)
        2
    """
    return OPERATION_ARITY[operation]
