"""
Subscription Pricing — производные ценовые метрики подписок

Чистые stateless функции над Product и коллекциями Product:
- has_free_trial: есть ли бесплатный trial
- one_year_approximate_subscription_price: приблизительная цена за год
- has_monthly_subscriptions / has_annual_subscriptions
- calculated_potential_discount: экономия annual vs monthly ("save X %")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает exception на "плохих" данных:
   отсутствие данных → None (per-product) или 0.0 (коллекция)
2. Продукт без subscription_period исключается из subscription-расчётов
3. PeriodUnit.UNKNOWN → "посчитать невозможно" (None), а не ошибка
4. Входная коллекция материализуется не более одного раза за вызов

ФОРМУЛЫ:
    annual_price = multiplier(unit) * price
    multiplier: day=365, week=52.1429, month=12, year=1
    potential_discount = 1 - annual_price / monthly_annualized_price

number_of_units в annual_price НЕ учитывается: "3 месяца" считается как
"1 месяц". Это оценка для отображения, не для биллинга.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Optional

from src.core.domain.product import PeriodUnit, Product
from src.core.math.numerical_safeguards import is_valid_float, is_zero, safe_divide

# =============================================================================
# ANNUALIZATION MULTIPLIERS
# =============================================================================

# Количество billing periods в году (приближённо, без високосных лет)
DAYS_PER_YEAR: Final[float] = 365.0

# 365 / 7, округлено до 4 знаков
WEEKS_PER_YEAR: Final[float] = 52.1429

MONTHS_PER_YEAR: Final[float] = 12.0

YEARS_PER_YEAR: Final[float] = 1.0

ANNUALIZATION_MULTIPLIERS: Final[dict[PeriodUnit, float]] = {
    PeriodUnit.DAY: DAYS_PER_YEAR,
    PeriodUnit.WEEK: WEEKS_PER_YEAR,
    PeriodUnit.MONTH: MONTHS_PER_YEAR,
    PeriodUnit.YEAR: YEARS_PER_YEAR,
}

# Sentinel "скидку посчитать невозможно"
NO_DISCOUNT: Final[float] = 0.0


# =============================================================================
# PER-PRODUCT
# =============================================================================


def has_free_trial(product: Product) -> bool:
    """
    Есть ли у продукта бесплатный trial.

    True только если introductory offer существует и его цена ровно 0.
    Скидочный (ненулевой) introductory offer → False.
    """
    if product.introductory_price is None:
        return False
    return product.introductory_price.price == 0


def one_year_approximate_subscription_price(product: Product) -> Optional[float]:
    """
    Приблизительная стоимость подписки за год.

    Используется для сравнения предложений ("save X %"), не для биллинга.
    Округление не применяется — его делает вызывающий код при отображении.

    Args:
        product: Продукт магазина

    Returns:
        multiplier(unit) * price, либо None если продукт не подписка
        или unit == UNKNOWN

    Examples:
        monthly 9.99 → 119.88
        weekly 1.00 → 52.1429
    """
    period = product.subscription_period
    if period is None:
        return None

    multiplier = ANNUALIZATION_MULTIPLIERS.get(period.unit)
    if multiplier is None:
        return None

    return multiplier * float(product.price)


# =============================================================================
# COLLECTION-LEVEL
# =============================================================================


def _has_unit(product: Product, unit: PeriodUnit) -> bool:
    return product.subscription_period is not None and product.subscription_period.unit == unit


def has_monthly_subscriptions(products: Iterable[Product]) -> bool:
    """True если хотя бы один продукт — месячная подписка (любой number_of_units)."""
    return any(_has_unit(p, PeriodUnit.MONTH) for p in products)


def has_annual_subscriptions(products: Iterable[Product]) -> bool:
    """True если хотя бы один продукт — годовая подписка."""
    return any(_has_unit(p, PeriodUnit.YEAR) for p in products)


def sort_by_subscription_period(products: Iterable[Product]) -> list[Product]:
    """
    Подписки, отсортированные по длительности периода.

    Ключ сортировки: (unit, number_of_units). Продукты без периода
    отбрасываются. Сортировка стабильная.
    """
    subscriptions = [p for p in products if p.subscription_period is not None]
    return sorted(
        subscriptions,
        key=lambda p: (p.subscription_period.unit, p.subscription_period.number_of_units),
    )


# =============================================================================
# POTENTIAL DISCOUNT
# =============================================================================


class DiscountReason(str, Enum):
    """Причина результата расчёта потенциальной скидки."""

    COMPUTED = "computed"
    AMBIGUOUS_ANNUAL = "ambiguous_annual"
    AMBIGUOUS_MONTHLY = "ambiguous_monthly"
    MISSING_ANNUAL = "missing_annual"
    MISSING_MONTHLY = "missing_monthly"
    ZERO_MONTHLY_PRICE = "zero_monthly_price"
    NON_FINITE_PRICE = "non_finite_price"


@dataclass(frozen=True)
class DiscountConfig:
    """Конфигурация расчёта потенциальной скидки."""

    # Больше кандидатов в категории → отказ угадывать (ambiguous)
    max_candidates_per_category: int = 1

    # Только настоящий календарный месяц (не "раз в 2 месяца")
    monthly_number_of_units: int = 1


@dataclass(frozen=True)
class DiscountEstimate:
    """Результат расчёта потенциальной скидки annual vs monthly."""

    discount_available: bool
    discount: float
    reason: DiscountReason

    # Входные цены для диагностики
    annual_price: Optional[float]
    monthly_annualized_price: Optional[float]
    annual_candidates: int
    monthly_candidates: int

    # Детали
    details: str


class PotentialDiscountCalculator:
    """
    Расчёт экономии годовой подписки относительно 12 месяцев месячной.

    Порядок проверок:
    1. Разбиение: annual (unit == YEAR), monthly (unit == MONTH и
       number_of_units == monthly_number_of_units)
    2. Больше max_candidates_per_category в любой категории → 0 (ambiguous)
    3. Нет кандидата или цена не вычисляется → 0
    4. Нулевая monthly цена → 0 (деление невозможно)
    5. Цена или отношение не finite (inf/NaN) → 0
    6. discount = 1 - annual / monthly_annualized

    Отрицательный discount означает, что annual дороже monthly.
    """

    def __init__(self, config: Optional[DiscountConfig] = None):
        self.config = config or DiscountConfig()

    def _is_annual(self, product: Product) -> bool:
        return _has_unit(product, PeriodUnit.YEAR)

    def _is_monthly(self, product: Product) -> bool:
        return (
            _has_unit(product, PeriodUnit.MONTH)
            and product.subscription_period.number_of_units == self.config.monthly_number_of_units
        )

    def evaluate(self, products: Iterable[Product]) -> DiscountEstimate:
        """
        Оценка потенциальной скидки для коллекции продуктов.

        Args:
            products: Любая конечная коллекция продуктов (порядок не важен)

        Returns:
            DiscountEstimate; discount == 0.0 для любого вырожденного входа
        """
        catalog = tuple(products)
        annual = [p for p in catalog if self._is_annual(p)]
        monthly = [p for p in catalog if self._is_monthly(p)]
        limit = self.config.max_candidates_per_category

        def _no_discount(
            reason: DiscountReason,
            details: str,
            annual_price: Optional[float] = None,
            monthly_price: Optional[float] = None,
        ) -> DiscountEstimate:
            return DiscountEstimate(
                discount_available=False,
                discount=NO_DISCOUNT,
                reason=reason,
                annual_price=annual_price,
                monthly_annualized_price=monthly_price,
                annual_candidates=len(annual),
                monthly_candidates=len(monthly),
                details=details,
            )

        # 1. Ambiguity: отказываемся выбирать между конкурирующими offers
        if len(annual) > limit:
            return _no_discount(
                DiscountReason.AMBIGUOUS_ANNUAL,
                f"{len(annual)} annual subscriptions found, expected at most {limit}",
            )
        if len(monthly) > limit:
            return _no_discount(
                DiscountReason.AMBIGUOUS_MONTHLY,
                f"{len(monthly)} monthly subscriptions found, expected at most {limit}",
            )

        # 2. Наличие кандидатов с вычислимой ценой
        annual_price = one_year_approximate_subscription_price(annual[0]) if annual else None
        monthly_price = one_year_approximate_subscription_price(monthly[0]) if monthly else None

        if annual_price is None:
            return _no_discount(
                DiscountReason.MISSING_ANNUAL,
                "No annual subscription to compare",
                monthly_price=monthly_price,
            )
        if monthly_price is None:
            return _no_discount(
                DiscountReason.MISSING_MONTHLY,
                "No monthly subscription to compare",
                annual_price=annual_price,
            )

        # 4. Нулевая monthly цена: отношение не определено
        if is_zero(monthly_price):
            return _no_discount(
                DiscountReason.ZERO_MONTHLY_PRICE,
                "Monthly subscription is free, discount undefined",
                annual_price=annual_price,
                monthly_price=monthly_price,
            )

        # 5. Цена или отношение вне диапазона float (например, Decimal("1e400"))
        ratio = safe_divide(annual_price, monthly_price, fallback=math.nan)
        if not (is_valid_float(annual_price) and is_valid_float(monthly_price) and is_valid_float(ratio)):
            return _no_discount(
                DiscountReason.NON_FINITE_PRICE,
                "Annualized price or price ratio is not finite, discount undefined",
                annual_price=annual_price,
                monthly_price=monthly_price,
            )

        # 6. PASS
        discount = 1.0 - ratio

        return DiscountEstimate(
            discount_available=True,
            discount=discount,
            reason=DiscountReason.COMPUTED,
            annual_price=annual_price,
            monthly_annualized_price=monthly_price,
            annual_candidates=len(annual),
            monthly_candidates=len(monthly),
            details=(
                f"annual={annual_price:.4f}, monthly_annualized={monthly_price:.4f}, "
                f"discount={discount:.4f}"
            ),
        )


_DEFAULT_CALCULATOR = PotentialDiscountCalculator()


def evaluate_potential_discount(
    products: Iterable[Product], config: Optional[DiscountConfig] = None
) -> DiscountEstimate:
    """
    Расширенный результат расчёта скидки (с причиной).

    Отличает "сравнение невозможно" от "посчитанная скидка 0%".
    """
    if config is None:
        return _DEFAULT_CALCULATOR.evaluate(products)
    return PotentialDiscountCalculator(config).evaluate(products)


def calculated_potential_discount(products: Iterable[Product]) -> float:
    """
    Экономия annual vs monthly в долях (0.2 = "save 20%").

    Returns:
        0.0 если annual или monthly кандидатов больше одного, если
        какого-то нет, или цену посчитать невозможно. Вызывающий код
        должен трактовать 0.0 как "скидку посчитать невозможно".
    """
    return evaluate_potential_discount(products).discount
