"""
Diagnostics — канал диагностических сообщений

Ядро калькулятора не пишет в глобальный поток ошибок: все сообщения о
некорректном вводе уходят в инжектируемый reporter с единственным методом
report(message). Это оставляет вычисление чистой функцией для тестов.

Реализации:
- LoggingReporter: пишет в logger "linecalc.diagnostics" (WARNING)
- CollectingReporter: накапливает сообщения в памяти
- NullReporter: отбрасывает сообщения
"""

import logging
from enum import Enum
from typing import Protocol, runtime_checkable


# =============================================================================
# ERROR TAXONOMY
# =============================================================================


class EvaluationError(str, Enum):
    """Категория ошибки обработки строки.

    Все ошибки нефатальны: результат — неизменённый аккумулятор
    плюс диагностическое сообщение.
    """

    UNRECOGNIZED_OPERATION = "unrecognized_operation"
    MALFORMED_KEYWORD = "malformed_keyword"
    ARGUMENT_PARSE_ERROR = "argument_parse_error"
    UNPARSED_SUFFIX = "unparsed_suffix"
    UNEXPECTED_SUFFIX = "unexpected_suffix"
    MISSING_ARGUMENT = "missing_argument"
    DOMAIN_ERROR = "domain_error"
    FOLD_OPERATION = "fold_operation"
    FOLD_NO_ARGUMENTS = "fold_no_arguments"
    FOLD_BAD_ARGUMENT = "fold_bad_argument"


# =============================================================================
# REPORTERS
# =============================================================================


@runtime_checkable
class DiagnosticReporter(Protocol):
    """Приёмник диагностических сообщений."""

    def report(self, message: str) -> None:
        ...


class LoggingReporter:
    """Reporter по умолчанию: сообщения уходят в logging."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.WARNING):
        self.logger = logger or logging.getLogger("linecalc.diagnostics")
        self.level = level

    def report(self, message: str) -> None:
        self.logger.log(self.level, message)


class CollectingReporter:
    """
    Reporter, накапливающий сообщения в памяти.

    Используется в тестах и при встраивании, когда диагностику нужно
    показать рядом с результатом.
    """

    def __init__(self):
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)


class NullReporter:
    """Отбрасывает все сообщения."""

    def report(self, message: str) -> None:
        pass
