"""Integration tests for the AddProduct use case.

Uses in-memory fake repositories — no file I/O.
"""

from decimal import Decimal

import pytest

from gas.application.add_product import MAX_IDENTITY_ATTEMPTS, AddProductHandler
from gas.application.dto import ProductSpec
from gas.domain.exceptions import DuplicateEntityError, ValidationError
from gas.domain.model.product import Product
from gas.domain.model.value_objects import Measure, Money, Supplier
from tests.fakes import FakeProductRepository

SUPPLIER = Supplier(id="S1", name="Cascina Bio")


class RacingProductRepository(FakeProductRepository):
    """Another process stores the same identity between lookup and add."""

    def __init__(self, races: int) -> None:
        super().__init__()
        self._races = races

    def add(self, product: Product) -> None:
        if self._races > 0:
            self._races -= 1
            super().add(product.with_changes(name="Concurrent"))
        super().add(product)


def _spec(**overrides) -> ProductSpec:
    fields = dict(name="Widget", supplier=SUPPLIER, price="15.00")
    fields.update(overrides)
    return ProductSpec(**fields)


class TestAddProductHappyPath:

    def test_assigns_slug_identity(self):
        repo = FakeProductRepository()
        product = AddProductHandler(repo).handle(_spec())
        assert product.id == "S1::widget"
        assert repo.get_by_id("S1::widget") == product

    def test_same_name_gets_suffixes(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        ids = [handler.handle(_spec()).id for _ in range(3)]
        assert ids == ["S1::widget", "S1::widget_1", "S1::widget_2"]

    def test_converts_spec_fields(self):
        product = AddProductHandler(FakeProductRepository()).handle(_spec(
            discount="10",
            measure=Measure(id="kg", name="kg"),
            max_available="20",
            portion_quantity="0.5",
            transport="3",
            variable=True,
            variants={"Taglia": ["S", "M"]},
        ))
        assert product.discount == Decimal("10")
        assert product.max_available == Decimal("20")
        assert product.portion_quantity == Decimal("0.5")
        assert product.min_quantity == Decimal("0")
        assert product.transport == Money.of("3")
        assert product.variable
        assert product.variants[0].values == ("S", "M")

    def test_empty_transport_means_none(self):
        product = AddProductHandler(FakeProductRepository()).handle(_spec(transport=""))
        assert product.transport is None


class TestAddProductConcurrency:

    def test_lost_race_retries_with_fresh_identity(self):
        repo = RacingProductRepository(races=1)
        product = AddProductHandler(repo).handle(_spec())
        assert product.id == "S1::widget_1"
        assert repo.get_by_id("S1::widget").name == "Concurrent"

    def test_gives_up_after_max_attempts(self):
        repo = RacingProductRepository(races=MAX_IDENTITY_ATTEMPTS)
        with pytest.raises(DuplicateEntityError, match="Could not find a free identity"):
            AddProductHandler(repo).handle(_spec())


class TestAddProductValidation:

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(FakeProductRepository()).handle(_spec(name=" "))

    def test_bad_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(FakeProductRepository()).handle(_spec(price="abc"))

    def test_nothing_stored_on_failure(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError):
            AddProductHandler(repo).handle(_spec(discount="200"))
        assert repo.list_all() == []

    @pytest.mark.parametrize("field", ["max_available", "portion_quantity", "multiple"])
    @pytest.mark.parametrize("raw", ["NaN", "Infinity"])
    def test_non_finite_quantity_rejected(self, field, raw):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError, match=f"Invalid {field}"):
            AddProductHandler(repo).handle(_spec(**{field: raw}))
        assert repo.list_all() == []

    def test_unsluggable_name_rejected(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError, match="no characters usable"):
            AddProductHandler(repo).handle(_spec(name="Мёд"))
        assert repo.list_all() == []
