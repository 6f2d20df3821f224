"""
Config Contract — JSON Schema контракт файла конфигурации

Файл конфигурации проверяется схемой calculator_config.json (Draft 2020-12)
до построения CalculatorConfig: схема ловит структурные ошибки (лишние
ключи, типы, schema_version), pydantic модель — смысловые ограничения.
"""

import json
from pathlib import Path
from typing import Any, Final, Iterator, Mapping

from jsonschema import Draft202012Validator, SchemaError, ValidationError


# =============================================================================
# CONSTANTS
# =============================================================================

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

CALCULATOR_CONFIG_CONTRACT: Final[str] = "calculator_config"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение схем из каталога schema/ с meta-validation и кэшем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        self._cache: dict[str, dict[str, Any]] = {}

    def load_schema(self, name: str) -> dict[str, Any]:
        """
        Args:
            name: Имя контракта без расширения ('calculator_config')

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если схема не проходит meta-validation
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid contract {name}: {e.message}") from e

        self._cache[name] = schema
        return schema


_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка документа против одного именованного контракта."""

    def __init__(self, contract: str, loader: SchemaLoader | None = None):
        self.contract = contract
        self.schema = (loader or _LOADER).load_schema(contract)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, document: Mapping[str, Any]) -> None:
        """
        Raises:
            ValidationError: первое нарушение контракта
        """
        self._validator.validate(dict(document))

    def is_valid(self, document: Mapping[str, Any]) -> bool:
        return self._validator.is_valid(dict(document))

    def iter_errors(self, document: Mapping[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения, отсортированные по пути в документе."""
        return iter(
            sorted(self._validator.iter_errors(dict(document)), key=lambda e: list(e.path))
        )


class CalculatorConfigValidator(ContractValidator):
    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(CALCULATOR_CONFIG_CONTRACT, loader)


# =============================================================================
# HELPERS
# =============================================================================


def describe_violation(error: ValidationError) -> str:
    """
    Однострочное описание нарушения: "<путь>: <сообщение>".

    Examples:
        max_decimal_digits: 'ten' is not of type 'integer'
        <root>: 'schema_version' is a required property
    """
    location = ".".join(str(part) for part in error.absolute_path) or "<root>"
    return f"{location}: {error.message}"


def validate_calculator_config(document: Mapping[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если документ нарушает контракт calculator_config
    """
    CalculatorConfigValidator().validate(document)
