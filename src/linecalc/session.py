"""Session — аккумулятор, переходящий от строки к строке.

Ядро (LineEvaluator) не хранит состояния: значение передаётся на вход и
возвращается. Сессия хранит текущее значение и историю результатов для
read-eval-print цикла и встраивания.
"""

from collections import deque
from typing import Deque

from linecalc.config import CalculatorConfig
from linecalc.core.domain.diagnostics import DiagnosticReporter
from linecalc.evaluator.line_evaluator import EvaluationResult, LineEvaluator
from linecalc.logging_config import get_logger

logger = get_logger("session")


class CalculatorSession:
    """Сессия калькулятора с одним аккумулятором.

    Не потокобезопасна: у сессии один владелец, строки применяются
    последовательно.
    """

    def __init__(
        self,
        initial: float = 0.0,
        config: CalculatorConfig | None = None,
        reporter: DiagnosticReporter | None = None,
    ):
        """
        Args:
            initial: начальное значение аккумулятора
            config: параметры разбора и размер истории
            reporter: приёмник диагностики (default: logging)
        """
        self.config = config if config is not None else CalculatorConfig()
        self.evaluator = LineEvaluator(self.config, reporter)
        self._value = float(initial)
        self._history: Deque[EvaluationResult] = deque(maxlen=self.config.history_limit)

    @property
    def value(self) -> float:
        return self._value

    @property
    def history(self) -> tuple[EvaluationResult, ...]:
        return tuple(self._history)

    def apply(self, line: str) -> EvaluationResult:
        """Применение строки к текущему значению."""
        result = self.evaluator.evaluate(self._value, line)
        self._value = result.value
        self._history.append(result)
        return result

    def apply_all(self, lines) -> float:
        """Последовательное применение строк; возвращает итоговое значение."""
        for line in lines:
            self.apply(line)
        return self._value

    def reset(self, value: float = 0.0) -> None:
        logger.debug("session reset to %r", value)
        self._value = float(value)
        self._history.clear()
