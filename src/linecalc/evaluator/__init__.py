"""Evaluator — обработка строки: plain и left-fold пути."""

from .line_evaluator import EvaluationResult, LineEvaluator, process_line

__all__ = [
    "EvaluationResult",
    "LineEvaluator",
    "process_line",
]
