"""
Core math modules

Численные примитивы и расчёты цен подписок.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    is_valid_float,
    is_zero,
    safe_divide,
    sanitize_float,
)

# Subscription Pricing
from src.core.math.subscription_pricing import (
    ANNUALIZATION_MULTIPLIERS,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
    NO_DISCOUNT,
    WEEKS_PER_YEAR,
    YEARS_PER_YEAR,
    DiscountConfig,
    DiscountEstimate,
    DiscountReason,
    PotentialDiscountCalculator,
    calculated_potential_discount,
    evaluate_potential_discount,
    has_annual_subscriptions,
    has_free_trial,
    has_monthly_subscriptions,
    one_year_approximate_subscription_price,
    sort_by_subscription_period,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    # Numerical Safeguards — Functions
    "is_valid_float",
    "is_zero",
    "safe_divide",
    "sanitize_float",
    # Subscription Pricing — Constants
    "ANNUALIZATION_MULTIPLIERS",
    "DAYS_PER_YEAR",
    "WEEKS_PER_YEAR",
    "MONTHS_PER_YEAR",
    "YEARS_PER_YEAR",
    "NO_DISCOUNT",
    # Subscription Pricing — Types
    "DiscountConfig",
    "DiscountEstimate",
    "DiscountReason",
    "PotentialDiscountCalculator",
    # Subscription Pricing — Functions
    "has_free_trial",
    "one_year_approximate_subscription_price",
    "has_monthly_subscriptions",
    "has_annual_subscriptions",
    "sort_by_subscription_period",
    "evaluate_potential_discount",
    "calculated_potential_discount",
]
