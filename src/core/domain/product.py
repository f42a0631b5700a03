"""
Product — Модель продукта магазина (in-app purchase / subscription)

Immutable Pydantic модели, описывающие запись продукта, полученную от
платформенного commerce API (каталог магазина). Модуль только читает эти
данные: продукты создаются внешним слоем интеграции и передаются в
калькулятор цен как есть.

Структура:
- Product: цена, introductory offer, период подписки
- ProductDiscount: introductory price (trial / скидка на старте)
- SubscriptionPeriod: unit + number_of_units
- PeriodUnit: day < week < month < year (+ UNKNOWN для будущих единиц)
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Final, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class PeriodUnit(str, Enum):
    """
    Единица периода подписки.

    Порядок определяется длительностью (а не строковым значением):
    DAY < WEEK < MONTH < YEAR. UNKNOWN — зарезервированное значение для
    единиц, которые платформа может добавить в будущем; оно всегда
    сортируется после YEAR.
    """

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "PeriodUnit":
        # Платформенные raw values (0..3) и любые нераспознанные значения
        if isinstance(value, bool):
            return cls.UNKNOWN
        if isinstance(value, int):
            return _RAW_VALUE_UNITS.get(value, cls.UNKNOWN)
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.UNKNOWN

    @property
    def rank(self) -> int:
        """Позиция единицы в порядке длительности."""
        return _PERIOD_UNIT_RANK[self]

    @property
    def is_known(self) -> bool:
        return self is not PeriodUnit.UNKNOWN

    @staticmethod
    def _rank_of(other: object) -> int:
        # str/int приводятся через PeriodUnit(...), иначе Python откатится
        # к алфавитному str.__lt__
        if isinstance(other, PeriodUnit):
            return other.rank
        if isinstance(other, (str, int)) and not isinstance(other, bool):
            return PeriodUnit(other).rank
        raise TypeError(
            f"Cannot compare PeriodUnit with {type(other).__name__}"
        )

    def __lt__(self, other: object) -> bool:
        return self.rank < self._rank_of(other)

    def __le__(self, other: object) -> bool:
        return self.rank <= self._rank_of(other)

    def __gt__(self, other: object) -> bool:
        return self.rank > self._rank_of(other)

    def __ge__(self, other: object) -> bool:
        return self.rank >= self._rank_of(other)


_PERIOD_UNIT_RANK: Final[dict[PeriodUnit, int]] = {
    PeriodUnit.DAY: 0,
    PeriodUnit.WEEK: 1,
    PeriodUnit.MONTH: 2,
    PeriodUnit.YEAR: 3,
    PeriodUnit.UNKNOWN: 4,
}

# Raw values платформы (SKProduct.PeriodUnit)
_RAW_VALUE_UNITS: Final[dict[int, PeriodUnit]] = {
    0: PeriodUnit.DAY,
    1: PeriodUnit.WEEK,
    2: PeriodUnit.MONTH,
    3: PeriodUnit.YEAR,
}


class PaymentMode(str, Enum):
    """Режим оплаты introductory offer."""

    PAY_AS_YOU_GO = "pay_as_you_go"
    PAY_UP_FRONT = "pay_up_front"
    FREE_TRIAL = "free_trial"


def compare_period_units(unit_a: PeriodUnit, unit_b: PeriodUnit) -> int:
    """
    Сравнение двух единиц периода по длительности.

    Args:
        unit_a: Первая единица
        unit_b: Вторая единица

    Returns:
        -1 если unit_a < unit_b, 0 если равны, 1 если unit_a > unit_b

    Examples:
        >>> compare_period_units(PeriodUnit.DAY, PeriodUnit.YEAR)
        -1
        >>> compare_period_units(PeriodUnit.MONTH, PeriodUnit.MONTH)
        0
    """
    a = PeriodUnit(unit_a)
    b = PeriodUnit(unit_b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


# =============================================================================
# NESTED MODELS
# =============================================================================


class SubscriptionPeriod(BaseModel):
    """
    Период подписки: сколько единиц составляет один billing period.

    Например: number_of_units=1, unit=MONTH → ежемесячное списание.
    """

    unit: PeriodUnit = Field(..., description="Единица периода (day/week/month/year)")
    number_of_units: int = Field(..., gt=0, description="Количество единиц в периоде")

    model_config = {"frozen": True}

    @field_validator("unit", mode="before")
    @classmethod
    def parse_unit(cls, v: Any) -> PeriodUnit:
        """Нераспознанные единицы не отклоняются, а становятся UNKNOWN."""
        return PeriodUnit(v)


class ProductDiscount(BaseModel):
    """
    Introductory offer продукта.

    price == 0 означает бесплатный trial.
    """

    price: Decimal = Field(..., ge=0, description="Цена introductory offer")
    payment_mode: Optional[PaymentMode] = Field(None, description="Режим оплаты offer")
    number_of_periods: int = Field(1, ge=1, description="Количество периодов offer")
    subscription_period: Optional[SubscriptionPeriod] = Field(
        None, description="Длительность одного периода offer"
    )

    model_config = {"frozen": True}


# =============================================================================
# PRODUCT MODEL
# =============================================================================


class Product(BaseModel):
    """
    Модель продукта магазина.

    Immutable модель (frozen=True): калькулятор только читает продукт.
    Продукт без subscription_period не является подпиской и исключается
    из всех subscription-расчётов; наличие trial от этого не зависит.
    """

    product_identifier: str = Field(..., min_length=1, description="Идентификатор продукта в магазине")
    price: Decimal = Field(..., ge=0, description="Цена за billing period")
    introductory_price: Optional[ProductDiscount] = Field(
        None, description="Introductory offer (None — offer отсутствует)"
    )
    subscription_period: Optional[SubscriptionPeriod] = Field(
        None, description="Период подписки (None — не подписка)"
    )
    subscription_group_identifier: Optional[str] = Field(
        None, description="Группа подписок в магазине"
    )

    model_config = {"frozen": True}

    @property
    def is_subscription(self) -> bool:
        return self.subscription_period is not None

    @property
    def period_unit(self) -> Optional[PeriodUnit]:
        """Единица периода или None, если продукт не подписка."""
        if self.subscription_period is None:
            return None
        return self.subscription_period.unit
