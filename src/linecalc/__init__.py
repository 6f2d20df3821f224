"""
linecalc — stateful line-oriented calculator

Один аккумулятор, одна строка на входе — одно значение на выходе:
- parser: распознавание операции и разбор литералов
- evaluator: plain и left-fold пути вычисления
- core: операции, диагностика, арифметика, JSON контракты
- session / cli: сессия и read-eval-print цикл
"""

from linecalc.config import CalculatorConfig, load_config
from linecalc.core.domain import (
    CollectingReporter,
    DiagnosticReporter,
    EvaluationError,
    LoggingReporter,
    Operation,
)
from linecalc.evaluator import EvaluationResult, LineEvaluator, process_line
from linecalc.session import CalculatorSession

__version__ = "0.1.0"

__all__ = [
    "CalculatorConfig",
    "CalculatorSession",
    "CollectingReporter",
    "DiagnosticReporter",
    "EvaluationError",
    "EvaluationResult",
    "LineEvaluator",
    "LoggingReporter",
    "Operation",
    "load_config",
    "process_line",
]
