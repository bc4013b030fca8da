"""
JSON Schema Contract Validators

Модуль для валидации JSON представления BigInteger согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema для проверки
соответствия данных схеме.

Схемы:
- big_integer.json (sign + digits)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.bignum.domain.big_integer import BigInteger
from src.bignum.domain.snapshot import BigIntegerSnapshot

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'big_integer')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class BigIntegerContractValidator:
    """
    Валидатор JSON представления BigInteger (схема big_integer.json).

    Схема загружается через общий кэширующий загрузчик, поэтому создание
    валидатора не перечитывает файл.
    """

    SCHEMA_NAME = "big_integer"

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.SCHEMA_NAME)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все ошибки валидации, а не только первая"""
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(data: Dict[str, Any]) -> None:
    """
    Валидация JSON представления BigInteger.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntegerContractValidator().validate(data)


def serialize_big_integer(value: BigInteger) -> Dict[str, Any]:
    """
    BigInteger → dict, соответствующий контракту big_integer.

    Examples:
        >>> serialize_big_integer(BigInteger(-120))
        {'sign': 'negative', 'digits': '120'}
    """
    return BigIntegerSnapshot.from_big_integer(value).model_dump(mode="json")


def deserialize_big_integer(data: Dict[str, Any]) -> BigInteger:
    """
    dict → BigInteger с проверкой контракта.

    Args:
        data: JSON представление ({"sign": ..., "digits": ...})

    Returns:
        Новый BigInteger

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    try:
        validate_big_integer(data)
    except ValidationError as e:
        logger.warning("big_integer contract violation: %s", e.message)
        raise

    return BigIntegerSnapshot.model_validate(data).to_big_integer()
