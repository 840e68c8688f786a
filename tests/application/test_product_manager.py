"""Integration tests for the ProductManager use cases."""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from catalog.application.product_manager import ProductManager
from catalog.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    ValidationError,
)
from catalog.domain.model.product import Product
from tests.fakes import FakeProductRepository, FixedClock

CREATED_AT = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


def _widget(**overrides):
    fields = dict(name="Widget", quantity=10, unit_price=Decimal("2.50"), supplier_id=1)
    fields.update(overrides)
    return Product(**fields)


def _setup(products=None):
    repo = FakeProductRepository(products)
    clock = FixedClock()
    return ProductManager(repo, clock), repo, clock


def _stored(id=1):
    return _widget(id=id, date_of_creation=CREATED_AT)


class TestListProducts:

    def test_returns_items_in_id_order(self):
        products = [_stored(3), _stored(1), _stored(2)]
        manager, _, _ = _setup(products)

        page = manager.list_products(0, 10)

        assert [p.id for p in page] == [1, 2, 3]
        assert page.total_elements == 3
        assert page.total_pages == 1

    def test_second_page(self):
        manager, _, _ = _setup([_stored(i) for i in range(1, 6)])

        page = manager.list_products(1, 2)

        assert [p.id for p in page] == [3, 4]
        assert page.has_next

    @pytest.mark.parametrize("page_index, page_size", [(0, 1), (0, 10), (3, 5)])
    def test_empty_catalog_not_found(self, page_index, page_size):
        manager, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="No products found"):
            manager.list_products(page_index, page_size)

    def test_page_past_the_end_not_found(self):
        manager, _, _ = _setup([_stored(1), _stored(2)])
        with pytest.raises(EntityNotFoundError, match="No products found"):
            manager.list_products(5, 10)

    def test_invalid_page_request_rejected(self):
        manager, _, _ = _setup([_stored(1)])
        with pytest.raises(InvalidArgumentError):
            manager.list_products(0, 0)


class TestGetProduct:

    def test_returns_existing_product(self):
        manager, _, _ = _setup([_stored(1)])
        product = manager.get_product(1)
        assert product.name == "Widget"
        assert product.date_of_creation == CREATED_AT

    def test_missing_product_not_found(self):
        manager, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            manager.get_product(999)


class TestCreateProduct:

    def test_valid_candidate_is_saved(self):
        manager, repo, clock = _setup()
        candidate = _widget()

        result = manager.create_product(candidate)

        assert result == "Product saved successfully"
        assert candidate.id == 1
        stored = repo.get_by_id(1)
        assert stored.name == "Widget"
        assert stored.date_of_creation == clock.now()
        assert stored.date_of_last_update is None

    def test_ids_are_assigned_in_sequence(self):
        manager, _, _ = _setup()
        first, second = _widget(), _widget(name="Gadget")
        manager.create_product(first)
        manager.create_product(second)
        assert (first.id, second.id) == (1, 2)

    def test_zero_quantity_allowed(self):
        manager, repo, _ = _setup()
        manager.create_product(_widget(quantity=0))
        assert repo.get_by_id(1).quantity == 0

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"id": 7}, "ID must not be set"),
            ({"date_of_creation": CREATED_AT}, "dates must not be set"),
            ({"date_of_last_update": CREATED_AT}, "dates must not be set"),
            ({"name": ""}, "name is required"),
            ({"name": "   "}, "name is required"),
            ({"name": None}, "name is required"),
            ({"quantity": -1}, "quantity must not be negative"),
            ({"unit_price": Decimal("0")}, "price must be greater than zero"),
            ({"unit_price": Decimal("-2.50")}, "price must be greater than zero"),
            ({"unit_price": None}, "price must be greater than zero"),
            ({"unit_price": Decimal("NaN")}, "price must be greater than zero"),
            ({"unit_price": Decimal("Infinity")}, "price must be greater than zero"),
            ({"quantity": True}, "quantity must not be negative"),
        ],
    )
    def test_invalid_candidate_rejected_without_saving(self, overrides, message):
        manager, repo, _ = _setup()

        with pytest.raises(ValidationError, match=message):
            manager.create_product(_widget(**overrides))

        assert repo.save_calls == 0

    def test_rejected_candidate_keeps_no_creation_date(self):
        manager, _, _ = _setup()
        candidate = _widget(quantity=-5)
        with pytest.raises(ValidationError):
            manager.create_product(candidate)
        assert candidate.date_of_creation is None


class TestUpdateProduct:

    def test_copies_editable_fields(self):
        manager, repo, clock = _setup([_stored(1)])
        clock.advance(hours=1)

        result = manager.update_product(
            Product(id=1, name="Widget v2", quantity=7, unit_price=Decimal("3.00"), supplier_id=2)
        )

        assert result == "Product updated successfully"
        stored = repo.get_by_id(1)
        assert stored.name == "Widget v2"
        assert stored.quantity == 7
        assert stored.unit_price == Decimal("3.00")
        assert stored.supplier_id == 2
        assert stored.date_of_last_update == clock.now()

    def test_id_and_creation_date_untouched(self):
        manager, repo, _ = _setup([_stored(1)])
        candidate = _widget(id=1, name="Renamed", date_of_creation=datetime(1999, 1, 1))

        manager.update_product(candidate)

        stored = repo.get_by_id(1)
        assert stored.id == 1
        assert stored.date_of_creation == CREATED_AT

    def test_last_update_moves_forward(self):
        manager, repo, clock = _setup([_stored(1)])
        manager.update_product(_widget(id=1, name="A"))
        first = repo.get_by_id(1).date_of_last_update
        clock.advance(minutes=5)
        manager.update_product(_widget(id=1, name="B"))
        assert repo.get_by_id(1).date_of_last_update > first

    def test_missing_product_not_found_before_validation(self):
        manager, repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            manager.update_product(_widget(id=42, name="", quantity=-1))
        assert repo.save_calls == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"quantity": -1},
            {"quantity": True},
            {"unit_price": Decimal("0")},
            {"unit_price": Decimal("NaN")},
            {"unit_price": Decimal("Infinity")},
        ],
    )
    def test_invalid_fields_rejected(self, overrides):
        manager, repo, _ = _setup([_stored(1)])
        with pytest.raises(ValidationError):
            manager.update_product(_widget(id=1, **overrides))
        assert repo.save_calls == 0
        assert repo.get_by_id(1) == _stored(1)


class TestDeleteProduct:

    def test_deleted_product_is_gone(self):
        manager, _, _ = _setup([_stored(1), _stored(2)])

        assert manager.delete_product(1) == "Product deleted"

        with pytest.raises(EntityNotFoundError):
            manager.get_product(1)
        assert manager.get_product(2).id == 2

    def test_missing_product_not_found(self):
        manager, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            manager.delete_product(1)


class TestUpdateQuantity:

    def test_sets_quantity(self):
        manager, repo, _ = _setup([_stored(1)])

        assert manager.update_quantity(1, 5) == "Stock updated successfully"

        assert repo.get_by_id(1).quantity == 5

    def test_does_not_touch_last_update(self):
        manager, repo, clock = _setup([_stored(1)])
        clock.advance(days=1)
        manager.update_quantity(1, 5)
        assert repo.get_by_id(1).date_of_last_update is None

    def test_keeps_existing_last_update(self):
        updated_at = datetime(2024, 1, 2, 8, 30, tzinfo=timezone.utc)
        manager, repo, clock = _setup(
            [_widget(id=1, date_of_creation=CREATED_AT, date_of_last_update=updated_at)]
        )
        clock.advance(days=1)

        manager.update_quantity(1, 5)

        assert repo.get_by_id(1).date_of_last_update == updated_at

    def test_zero_allowed(self):
        manager, repo, _ = _setup([_stored(1)])
        manager.update_quantity(1, 0)
        assert repo.get_by_id(1).quantity == 0

    def test_negative_quantity_rejected(self):
        manager, repo, _ = _setup([_stored(1)])

        with pytest.raises(InvalidArgumentError, match="must not be negative"):
            manager.update_quantity(1, -1)

        assert repo.get_by_id(1).quantity == 10
        assert repo.save_calls == 0

    @pytest.mark.parametrize("new_quantity", [True, 2.5, "3"])
    def test_non_integer_quantity_rejected(self, new_quantity):
        manager, repo, _ = _setup([_stored(1)])

        with pytest.raises(InvalidArgumentError):
            manager.update_quantity(1, new_quantity)

        assert repo.get_by_id(1).quantity == 10
        assert repo.save_calls == 0

    def test_missing_product_not_found(self):
        manager, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            manager.update_quantity(1, -1)


class TestProductLifecycle:

    def test_create_restock_update_delete(self):
        manager, repo, clock = _setup()
        t0 = clock.now()

        manager.create_product(_widget(quantity=10, unit_price=Decimal("2.50")))
        stored = repo.get_by_id(1)
        assert stored.date_of_creation == t0

        manager.update_quantity(1, 7)
        stored = repo.get_by_id(1)
        assert stored.quantity == 7
        assert stored.date_of_last_update is None

        t1 = clock.advance(seconds=30)
        manager.update_product(
            replace(stored, name="Widget v2", unit_price=Decimal("3.00"))
        )
        stored = repo.get_by_id(1)
        assert stored.name == "Widget v2"
        assert stored.date_of_last_update == t1
        assert t1 >= t0

        manager.delete_product(1)
        with pytest.raises(EntityNotFoundError):
            manager.get_product(1)
