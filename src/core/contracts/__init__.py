"""
Contract Validation Module

Валидация записей продуктов каталога по JSON Schema контракту.
"""

from .validators import (
    PRODUCT_SCHEMA_NAME,
    SCHEMA_DIR,
    ProductValidator,
    load_schema,
    product_from_record,
    products_from_records,
    validate_product,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "PRODUCT_SCHEMA_NAME",
    # Classes
    "ProductValidator",
    # Functions
    "load_schema",
    "validate_product",
    "product_from_record",
    "products_from_records",
]
