"""
JSON Schema контракты для сериализованных BigNat / BigInt

Контракт описывает форму model_dump(mode="json"):
    bignat: {"digits": [d0, d1, ...]}
    bigint: {"sign": "positive" | "negative" | "zero", "magnitude": bignat}

Схемы поставляются как ресурсы пакета (schema/*.json) и читаются через
importlib.resources, поэтому работают и из установленного wheel.

Схема проверяет типы, диапазон цифр [0, 2^32) и согласованность знака с
пустотой модуля. Отсутствие старших нулевых цифр проверяет Pydantic модель.
"""

import json
from enum import Enum
from functools import lru_cache
from importlib import resources
from typing import Any, Final, Iterator

from jsonschema import Draft202012Validator, SchemaError, ValidationError

# Каталог схем внутри пакета
SCHEMA_DIR: Final[str] = "schema"


# =============================================================================
# ЗАГРУЗКА СХЕМ
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict[str, Any]:
    """
    Чтение и meta-валидация схемы из ресурсов пакета.

    Результат кэшируется: повторный вызов возвращает тот же объект.

    Args:
        name: Имя схемы без расширения ('bignat', 'bigint')

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если ресурс schema/<name>.json отсутствует
        ValueError: Если файл не является валидной JSON Schema draft 2020-12
    """
    resource = resources.files(__package__) / SCHEMA_DIR / f"{name}.json"
    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {name}.json: {e.message}") from e

    return schema


@lru_cache(maxsize=None)
def _compiled(name: str) -> Draft202012Validator:
    return Draft202012Validator(load_schema(name))


# =============================================================================
# КОНТРАКТЫ
# =============================================================================


class Contract(str, Enum):
    """Сериализованные формы значений библиотеки"""

    BIGNAT = "bignat"
    BIGINT = "bigint"

    @property
    def schema(self) -> dict[str, Any]:
        return load_schema(self.value)

    def validate(self, data: Any) -> None:
        """
        Проверка данных против схемы контракта.

        Raises:
            jsonschema.ValidationError: Первое (наиболее релевантное) нарушение
        """
        _compiled(self.value).validate(data)

    def is_valid(self, data: Any) -> bool:
        return _compiled(self.value).is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Все нарушения схемы, отсортированные по пути в документе."""
        return iter(sorted(_compiled(self.value).iter_errors(data), key=lambda e: e.json_path))

    def load(self, payload: str | bytes) -> Any:
        """
        Разбор JSON текста с проверкой контракта.

        Raises:
            json.JSONDecodeError: Если текст не является JSON
            jsonschema.ValidationError: Если документ нарушает схему
        """
        data = json.loads(payload)
        self.validate(data)
        return data


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bignat(data: Any) -> None:
    """Проверка сериализованного BigNat (см. Contract.validate)."""
    Contract.BIGNAT.validate(data)


def validate_bigint(data: Any) -> None:
    """Проверка сериализованного BigInt (см. Contract.validate)."""
    Contract.BIGINT.validate(data)
