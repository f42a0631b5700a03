"""
Domain models and value objects.

Contains store product entities: Product, ProductDiscount, SubscriptionPeriod.
"""

from src.core.domain.product import (
    PaymentMode,
    PeriodUnit,
    Product,
    ProductDiscount,
    SubscriptionPeriod,
    compare_period_units,
)

__all__ = [
    # Enums
    "PeriodUnit",
    "PaymentMode",
    # Models
    "Product",
    "ProductDiscount",
    "SubscriptionPeriod",
    # Ordering
    "compare_period_units",
]
