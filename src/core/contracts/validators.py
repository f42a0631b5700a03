"""
Product Record Contract

Валидация записей продуктов, поступающих от слоя интеграции с магазином,
согласно JSON Schema контракту (schema/product.json внутри пакета),
и построение immutable Pydantic моделей Product.

Схема загружается и проходит meta-validation при первом использовании,
а не при импорте модуля.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.product import Product

# Схемы поставляются как package data
SCHEMA_DIR = Path(__file__).parent / "schema"

PRODUCT_SCHEMA_NAME = "product"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema.

    Args:
        schema_name: Имя схемы без расширения (например, 'product')
        schema_dir: Директория со схемами

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return schema


@lru_cache(maxsize=None)
def _product_schema_validator(schema_dir: Path) -> Draft202012Validator:
    return Draft202012Validator(load_schema(PRODUCT_SCHEMA_NAME, schema_dir))


# =============================================================================
# PRODUCT VALIDATOR
# =============================================================================


class ProductValidator:
    """
    Валидатор записи продукта каталога.

    Draft202012Validator строится один раз на директорию схем и
    переиспользуется всеми экземплярами.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self.validator = _product_schema_validator(schema_dir)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, record: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если запись не соответствует схеме
        """
        self.validator.validate(record)

    def is_valid(self, record: Dict[str, Any]) -> bool:
        return self.validator.is_valid(record)

    def iter_errors(self, record: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации (без exception)."""
        return self.validator.iter_errors(record)

    def to_product(self, record: Dict[str, Any]) -> Product:
        """
        Валидация записи по контракту и построение Product.

        Raises:
            ValidationError (jsonschema): Нарушение контракта
            ValidationError (pydantic): Нарушение ограничений модели
        """
        self.validate(record)
        return Product.model_validate(record)

    def to_products(self, records: Iterable[Dict[str, Any]]) -> list[Product]:
        return [self.to_product(record) for record in records]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_product(record: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если запись не соответствует схеме
    """
    ProductValidator().validate(record)


def product_from_record(record: Dict[str, Any]) -> Product:
    return ProductValidator().to_product(record)


def products_from_records(records: Iterable[Dict[str, Any]]) -> list[Product]:
    """Построение списка Product из записей каталога."""
    return ProductValidator().to_products(records)
