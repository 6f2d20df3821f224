"""
Config — конфигурация калькулятора

Immutable Pydantic модель параметров разбора и сессии.
Источники:
- значения по умолчанию (CalculatorConfig())
- JSON файл, проверенный контрактом calculator_config (load_config)
- переменные окружения LINECALC_* (from_env)
"""

import json
import os
from pathlib import Path
from typing import Any, Final, Mapping

from pydantic import BaseModel, Field, field_validator

from linecalc.core.contracts import validate_calculator_config
from linecalc.core.domain.operation import OPERATOR_SYMBOLS, SQRT_KEYWORD
from linecalc.parser.literal import MAX_DECIMAL_DIGITS
from linecalc.parser.recognizer import FOLD_CLOSE, FOLD_OPEN


# =============================================================================
# CONSTANTS
# =============================================================================

ENV_PREFIX: Final[str] = "LINECALC_"

# Верхняя граница лимита цифр: больше значащих цифр double не хранит
MAX_DECIMAL_DIGITS_LIMIT: Final[int] = 15

HISTORY_LIMIT_DEFAULT: Final[int] = 1000


# =============================================================================
# MODEL
# =============================================================================


class CalculatorConfig(BaseModel):
    """
    Параметры разбора строк и сессии калькулятора.
    """

    max_decimal_digits: int = Field(
        MAX_DECIMAL_DIGITS,
        ge=1,
        le=MAX_DECIMAL_DIGITS_LIMIT,
        description="Максимум значащих цифр числового литерала",
    )
    fold_open: str = Field(
        FOLD_OPEN, min_length=1, max_length=1, description="Открывающая скобка left-fold"
    )
    fold_close: str = Field(
        FOLD_CLOSE, min_length=1, max_length=1, description="Закрывающая скобка left-fold"
    )
    allow_set_keyword: bool = Field(True, description="Распознавать ключевое слово SET")
    history_limit: int = Field(
        HISTORY_LIMIT_DEFAULT, ge=0, description="Размер истории CalculatorSession"
    )

    model_config = {"frozen": True}

    @field_validator("fold_open", "fold_close")
    @classmethod
    def validate_bracket(cls, v: str) -> str:
        """Скобка не может быть цифрой, точкой, пробелом или началом операции"""
        if v.isdigit() or v == "." or v.isspace():
            raise ValueError(f"bracket {v!r} conflicts with literal grammar")
        if v in OPERATOR_SYMBOLS or v == SQRT_KEYWORD[0]:
            raise ValueError(f"bracket {v!r} conflicts with operation symbols")
        return v

    @field_validator("fold_close")
    @classmethod
    def validate_close_differs(cls, v: str, info) -> str:
        """Проверка, что закрывающая скобка отличается от открывающей"""
        if "fold_open" in info.data and v == info.data["fold_open"]:
            raise ValueError("fold_close must differ from fold_open")
        return v


# =============================================================================
# LOADERS
# =============================================================================


def config_from_mapping(data: Mapping[str, Any]) -> CalculatorConfig:
    """
    Создание конфигурации из dict формата calculator_config.

    Raises:
        jsonschema.ValidationError: Если данные нарушают контракт
        pydantic.ValidationError: Если значения нарушают ограничения модели
    """
    validate_calculator_config(dict(data))
    fields = {key: value for key, value in data.items() if key != "schema_version"}
    return CalculatorConfig(**fields)


def load_config(path: str | Path) -> CalculatorConfig:
    """
    Загрузка конфигурации из JSON файла.

    Args:
        path: Путь к JSON файлу

    Returns:
        CalculatorConfig

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если данные нарушают контракт
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return config_from_mapping(data)


def from_env(environ: Mapping[str, str] | None = None) -> CalculatorConfig:
    """
    Конфигурация из переменных окружения.

    Поддерживаются:
    - LINECALC_MAX_DECIMAL_DIGITS
    - LINECALC_ALLOW_SET_KEYWORD (1/0, true/false)
    - LINECALC_HISTORY_LIMIT
    """
    environ = os.environ if environ is None else environ
    fields: dict[str, Any] = {}

    digits = environ.get(f"{ENV_PREFIX}MAX_DECIMAL_DIGITS")
    if digits is not None:
        fields["max_decimal_digits"] = digits

    allow_set = environ.get(f"{ENV_PREFIX}ALLOW_SET_KEYWORD")
    if allow_set is not None:
        fields["allow_set_keyword"] = allow_set.strip().lower() in ("1", "true", "yes", "on")

    history = environ.get(f"{ENV_PREFIX}HISTORY_LIMIT")
    if history is not None:
        fields["history_limit"] = history

    return CalculatorConfig(**fields)
