"""
Контракт сериализованной формы ExponentialNumber

Необязательное дополнение к числовому типу: словарь
{"mantissa", "exponent", "kind", "exponent_bits"} (см. to_contract())
проверяется по JSON Schema (Draft 2020-12) через jsonschema и может быть
превращён обратно в Huge / Humongous.

Схема проверяет то, что выразимо декларативно: ширину экспоненты по
exponent_bits, канонический диапазон мантиссы, единственный ноль.
Согласованность kind с самой мантиссой (NaN/Inf) проверяется при
восстановлении значения.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from expnum.core.domain.exponential_number import ExponentialNumber
from expnum.core.domain.variants import VARIANTS_BY_BITS

DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema по имени (без расширения .json).

    Каждая схема читается один раз и проходит meta-validation до
    попадания в кэш.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Файла <schema_name>.json нет в каталоге
            ValueError: Схема не проходит meta-validation
        """
        schema = self._cache.get(schema_name)
        if schema is None:
            schema = self._cache[schema_name] = self._read(schema_name)
        return schema

    def _read(self, schema_name: str) -> Dict[str, Any]:
        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e
        return schema


# =============================================================================
# CONTRACT
# =============================================================================


class ExponentialNumberContract:
    """
    Контракт exponential_number.json.

    validate() / is_valid() / describe_errors() работают только со схемой,
    restore() дополнительно собирает значение нужного варианта.
    """

    SCHEMA_NAME = "exponential_number"

    def __init__(self, loader: Optional[SchemaLoader] = None):
        schema = (loader or SchemaLoader()).load_schema(self.SCHEMA_NAME)
        self._validator = Draft202012Validator(schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def describe_errors(self, data: Dict[str, Any]) -> list[str]:
        """
        Все нарушения в виде "<путь>: <сообщение>", отсортированные по пути.

        Пустой список, если данные валидны.
        """
        errors: list[ValidationError] = sorted(
            self._validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path))
        )
        return [
            f"{'/'.join(map(str, error.absolute_path)) or '<root>'}: {error.message}"
            for error in errors
        ]

    def restore(self, data: Dict[str, Any]) -> ExponentialNumber:
        """
        Значение из контракта.

        Вариант выбирается по exponent_bits; пара проходит через
        нормализующий конструктор, поэтому kind пересчитывается из мантиссы.

        Raises:
            ValidationError: Данные не соответствуют схеме
            ValueError: kind не совпадает с классификацией мантиссы
        """
        self.validate(data)
        variant = VARIANTS_BY_BITS[data["exponent_bits"]]
        value = variant(data["mantissa"], data["exponent"])

        if value.kind.value != data["kind"]:
            raise ValueError(
                f"kind {data['kind']!r} does not match mantissa {data['mantissa']!r}"
            )
        return value


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_CONTRACT = ExponentialNumberContract()


def validate_exponential_number(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Данные не соответствуют схеме
    """
    _CONTRACT.validate(data)


def exponential_number_from_contract(data: Dict[str, Any]) -> ExponentialNumber:
    """Сокращение для ExponentialNumberContract().restore(data)."""
    return _CONTRACT.restore(data)
