"""
Numerical Safeguards — Safe Math Primitives

Примитивы численной устойчивости для расчётов цен подписок:
- NaN/Inf санитизация (цены приходят как Decimal, расчёт идёт во float)
- Безопасное деление: деление на нулевую цену возвращает fallback
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Замена NaN/Inf на fallback значение.

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(numerator: float, denominator: float, fallback: float = 0.0) -> float:
    """
    Деление с защитой от нулевого знаменателя и NaN/Inf.

    В отличие от epsilon-клампинга знаменателя, нулевая цена здесь
    означает "сравнение невозможно", поэтому возвращается fallback,
    а не огромное частное.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при делении на ноль или невалидном результате

    Returns:
        numerator / denominator или fallback

    Examples:
        >>> safe_divide(120.0, 144.0)
        0.8333333333333334
        >>> safe_divide(120.0, 0.0)
        0.0
    """
    if not is_valid_float(numerator) or not is_valid_float(denominator):
        return fallback

    if is_zero(denominator):
        return fallback

    return sanitize_float(numerator / denominator, fallback=fallback)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol
