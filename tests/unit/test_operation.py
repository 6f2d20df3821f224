"""
Тесты для Operation — операции калькулятора и их арность

Проверяемые инварианты:
1. ERROR имеет арность 0, NEG/SQRT — 1, остальные — 2
2. Таблица односимвольных операторов полная
3. foldable: только бинарные операции, кроме SET
"""

import pytest

from linecalc.core.domain import (
    OPERATION_ARITY,
    OPERATOR_SYMBOLS,
    Operation,
    arity,
)


# =============================================================================
# ТЕСТЫ: Арность
# =============================================================================


class TestArity:
    """Тесты арности операций."""

    def test_error_has_zero_arity(self):
        """ERROR — нулевая арность."""
        assert arity(Operation.ERROR) == 0
        assert Operation.ERROR.arity == 0

    @pytest.mark.parametrize("operation", [Operation.NEG, Operation.SQRT])
    def test_unary_operations(self, operation):
        """NEG и SQRT унарные."""
        assert operation.arity == 1
        assert operation.is_unary
        assert not operation.is_binary

    @pytest.mark.parametrize(
        "operation",
        [
            Operation.SET,
            Operation.ADD,
            Operation.SUB,
            Operation.MUL,
            Operation.DIV,
            Operation.REM,
            Operation.POW,
        ],
    )
    def test_binary_operations(self, operation):
        """Остальные операции бинарные."""
        assert operation.arity == 2
        assert operation.is_binary
        assert not operation.is_unary

    def test_arity_table_covers_all_operations(self):
        """Каждая операция присутствует в таблице арности."""
        assert set(OPERATION_ARITY) == set(Operation)


# =============================================================================
# ТЕСТЫ: Символы и fold
# =============================================================================


class TestSymbols:
    """Тесты таблицы односимвольных операторов."""

    def test_symbol_mapping(self):
        assert OPERATOR_SYMBOLS == {
            "+": Operation.ADD,
            "-": Operation.SUB,
            "*": Operation.MUL,
            "/": Operation.DIV,
            "%": Operation.REM,
            "_": Operation.NEG,
            "^": Operation.POW,
        }

    def test_foldable(self):
        """Свёртка допустима только для бинарных операций кроме SET."""
        foldable = {op for op in Operation if op.foldable}
        assert foldable == {
            Operation.ADD,
            Operation.SUB,
            Operation.MUL,
            Operation.DIV,
            Operation.REM,
            Operation.POW,
        }
        assert not Operation.SET.foldable
        assert not Operation.NEG.foldable
        assert not Operation.ERROR.foldable
