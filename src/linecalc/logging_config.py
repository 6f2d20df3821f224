"""
Logging — настройка логирования linecalc

Все логгеры пакета живут под "linecalc":
- linecalc.diagnostics — сообщения о некорректных строках (LoggingReporter)
- linecalc.evaluator.* — трассировка вычислений (DEBUG)
- linecalc.session, linecalc.cli

Вывод в stderr (stdout занят значениями аккумулятора), опционально в файл.
Формат — текст или JSON (одна запись на строку).
"""

import json
import logging
import sys
from typing import Any, Final

PACKAGE_LOGGER: Final[str] = "linecalc"

TEXT_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"

LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_logging_configured = False

# Атрибуты, которые есть у любого LogRecord; всё остальное пришло через extra=
_STANDARD_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Запись лога → JSON объект (поля extra= переносятся как есть)."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _make_handlers(
    formatter: logging.Formatter, log_file: str | None
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    json_format: bool = False,
    force: bool = False,
) -> None:
    """
    Настройка логгера пакета.

    Повторный вызов без force ничего не меняет.

    Args:
        level: Имя уровня (DEBUG, INFO, WARNING, ERROR)
        log_file: Дополнительный файл для записи
        json_format: JSON вместо текста
        force: Перенастроить, даже если логирование уже настроено
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(LEVELS.get(level.upper(), logging.WARNING))

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT)
    for handler in _make_handlers(formatter, log_file):
        package_logger.addHandler(handler)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Логгер linecalc.<name>."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
