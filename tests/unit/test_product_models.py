"""
Тесты для доменных моделей продукта: Product, ProductDiscount, SubscriptionPeriod, PeriodUnit

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Forward-compatible парсинг PeriodUnit (UNKNOWN, raw values платформы)
4. Порядок единиц периода day < week < month < year
"""

from decimal import Decimal
from itertools import permutations

import pytest
from pydantic import ValidationError

from src.core.domain import (
    PaymentMode,
    PeriodUnit,
    Product,
    ProductDiscount,
    SubscriptionPeriod,
    compare_period_units,
)

KNOWN_UNITS = [PeriodUnit.DAY, PeriodUnit.WEEK, PeriodUnit.MONTH, PeriodUnit.YEAR]


# =============================================================================
# PERIOD UNIT TESTS
# =============================================================================


class TestPeriodUnitParsing:
    """Тесты парсинга PeriodUnit"""

    def test_known_string_values(self) -> None:
        assert PeriodUnit("day") is PeriodUnit.DAY
        assert PeriodUnit("year") is PeriodUnit.YEAR

    def test_case_insensitive(self) -> None:
        assert PeriodUnit("Month") is PeriodUnit.MONTH
        assert PeriodUnit(" WEEK ") is PeriodUnit.WEEK

    def test_platform_raw_values(self) -> None:
        """Raw values платформы 0..3"""
        assert PeriodUnit(0) is PeriodUnit.DAY
        assert PeriodUnit(1) is PeriodUnit.WEEK
        assert PeriodUnit(2) is PeriodUnit.MONTH
        assert PeriodUnit(3) is PeriodUnit.YEAR

    def test_unrecognized_values_become_unknown(self) -> None:
        """Будущие единицы не ломают парсинг"""
        assert PeriodUnit("decade") is PeriodUnit.UNKNOWN
        assert PeriodUnit(7) is PeriodUnit.UNKNOWN
        assert PeriodUnit(None) is PeriodUnit.UNKNOWN
        assert PeriodUnit(True) is PeriodUnit.UNKNOWN

    def test_is_known(self) -> None:
        assert all(unit.is_known for unit in KNOWN_UNITS)
        assert not PeriodUnit.UNKNOWN.is_known


class TestPeriodUnitOrdering:
    """Тесты порядка day < week < month < year"""

    def test_strict_order(self) -> None:
        assert PeriodUnit.DAY < PeriodUnit.WEEK < PeriodUnit.MONTH < PeriodUnit.YEAR

    def test_order_is_not_alphabetical(self) -> None:
        """Строковый порядок дал бы month < week; ранговый — нет"""
        assert PeriodUnit.WEEK < PeriodUnit.MONTH
        assert PeriodUnit.YEAR > PeriodUnit.DAY

    def test_irreflexive(self) -> None:
        for unit in KNOWN_UNITS:
            assert not unit < unit
            assert unit <= unit
            assert unit >= unit

    def test_transitive(self) -> None:
        for a, b, c in permutations(KNOWN_UNITS, 3):
            if a < b and b < c:
                assert a < c

    def test_sorting_yields_duration_order(self) -> None:
        for shuffled in permutations(KNOWN_UNITS):
            assert sorted(shuffled) == KNOWN_UNITS

    def test_unknown_sorts_last(self) -> None:
        units = [PeriodUnit.UNKNOWN, PeriodUnit.MONTH, PeriodUnit.DAY]
        assert sorted(units) == [PeriodUnit.DAY, PeriodUnit.MONTH, PeriodUnit.UNKNOWN]

    def test_compare_period_units(self) -> None:
        assert compare_period_units(PeriodUnit.DAY, PeriodUnit.WEEK) == -1
        assert compare_period_units(PeriodUnit.YEAR, PeriodUnit.MONTH) == 1
        assert compare_period_units(PeriodUnit.MONTH, PeriodUnit.MONTH) == 0

    def test_compare_accepts_raw_values(self) -> None:
        assert compare_period_units("week", 2) == -1

    def test_comparison_with_string_uses_duration_order(self) -> None:
        """Строка приводится к PeriodUnit, а не сравнивается по алфавиту"""
        assert PeriodUnit.WEEK < "month"
        assert not PeriodUnit.WEEK > "month"
        assert PeriodUnit.YEAR >= "Day"
        assert "month" > PeriodUnit.WEEK

    def test_comparison_with_raw_value(self) -> None:
        assert PeriodUnit.DAY < 2
        assert PeriodUnit.YEAR <= 3

    def test_comparison_with_unrecognized_string(self) -> None:
        assert PeriodUnit.YEAR < "decade"

    def test_comparison_with_other_types_unsupported(self) -> None:
        with pytest.raises(TypeError):
            PeriodUnit.DAY < 5.0  # type: ignore[operator]
        with pytest.raises(TypeError):
            PeriodUnit.DAY >= None  # type: ignore[operator]
        with pytest.raises(TypeError):
            PeriodUnit.DAY < True  # type: ignore[operator]


# =============================================================================
# MODEL TESTS
# =============================================================================


class TestSubscriptionPeriod:
    """Тесты для модели SubscriptionPeriod"""

    def test_creation(self) -> None:
        period = SubscriptionPeriod(unit=PeriodUnit.MONTH, number_of_units=1)
        assert period.unit is PeriodUnit.MONTH
        assert period.number_of_units == 1

    def test_unknown_unit_accepted(self) -> None:
        period = SubscriptionPeriod(unit="fortnight", number_of_units=1)
        assert period.unit is PeriodUnit.UNKNOWN

    def test_raw_value_unit(self) -> None:
        period = SubscriptionPeriod(unit=3, number_of_units=1)
        assert period.unit is PeriodUnit.YEAR

    def test_number_of_units_positive(self) -> None:
        with pytest.raises(ValidationError):
            SubscriptionPeriod(unit=PeriodUnit.MONTH, number_of_units=0)

    def test_immutable(self) -> None:
        period = SubscriptionPeriod(unit=PeriodUnit.MONTH, number_of_units=1)
        with pytest.raises(ValidationError):
            period.number_of_units = 2  # type: ignore


class TestProduct:
    """Тесты для модели Product"""

    @pytest.fixture
    def monthly_product(self) -> Product:
        return Product(
            product_identifier="com.example.pro.monthly",
            price=Decimal("9.99"),
            introductory_price=ProductDiscount(
                price=Decimal("0"),
                payment_mode=PaymentMode.FREE_TRIAL,
                subscription_period=SubscriptionPeriod(unit=PeriodUnit.WEEK, number_of_units=1),
            ),
            subscription_period=SubscriptionPeriod(unit=PeriodUnit.MONTH, number_of_units=1),
            subscription_group_identifier="pro",
        )

    def test_creation(self, monthly_product: Product) -> None:
        assert monthly_product.price == Decimal("9.99")
        assert monthly_product.is_subscription
        assert monthly_product.period_unit is PeriodUnit.MONTH
        assert monthly_product.introductory_price.number_of_periods == 1

    def test_non_subscription(self) -> None:
        product = Product(product_identifier="com.example.coins", price=Decimal("0.99"))
        assert not product.is_subscription
        assert product.period_unit is None
        assert product.introductory_price is None

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Product(product_identifier="com.example.bad", price=Decimal("-1"))
        assert "price" in str(exc_info.value).lower()

    def test_negative_introductory_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProductDiscount(price=Decimal("-0.01"))

    def test_empty_identifier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Product(product_identifier="", price=Decimal("1"))

    def test_immutable(self, monthly_product: Product) -> None:
        with pytest.raises(ValidationError):
            monthly_product.price = Decimal("1.00")  # type: ignore

    def test_json_roundtrip(self, monthly_product: Product) -> None:
        data = monthly_product.model_dump(mode="json")
        assert data["subscription_period"]["unit"] == "month"
        assert Product.model_validate(data) == monthly_product
