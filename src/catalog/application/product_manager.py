"""Application service: product lifecycle use cases.

ProductManager is the single entry point for creating, reading, updating
and deleting catalog products. Every rule is checked before the repository
is touched, so a rejected call never leaves a partial write behind.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import NoReturn

from catalog.domain.clock import Clock
from catalog.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    ValidationError,
)
from catalog.domain.model.page import Page, PageRequest
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

PRODUCT_SAVED = "Product saved successfully"
PRODUCT_UPDATED = "Product updated successfully"
PRODUCT_DELETED = "Product deleted"
STOCK_UPDATED = "Stock updated successfully"


class ProductManager:

    def __init__(self, product_repo: ProductRepository, clock: Clock) -> None:
        self._product_repo = product_repo
        self._clock = clock

    # --- Queries --------------------------------------------------------------

    def list_products(self, page_index: int, page_size: int) -> Page:
        """Return one page of products.

        ``page_index`` is zero-based. An empty result is reported as
        not found, whether the catalog is empty or the page is past the end.
        """
        page = self._product_repo.find_page(PageRequest(page_index, page_size))
        if page.is_empty:
            raise EntityNotFoundError("No products found")
        return page

    def get_product(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product

    # --- Commands -------------------------------------------------------------

    def create_product(self, candidate: Product) -> str:
        """Persist a new product and stamp its creation date.

        The candidate must not carry an ID or either timestamp; those are
        owned by the repository and this manager.
        """
        if candidate.id is not None:
            self._reject("Product ID must not be set on creation")
        if candidate.date_of_creation is not None or candidate.date_of_last_update is not None:
            self._reject("Product dates must not be set on creation")
        self._check_fields(candidate)

        candidate.date_of_creation = self._clock.now()
        saved = self._product_repo.save(candidate)
        logger.info("Product %s '%s' created", saved.id, saved.name)
        return PRODUCT_SAVED

    def update_product(self, candidate: Product) -> str:
        """Overwrite the editable fields of an existing product.

        Only ``name``, ``quantity``, ``unit_price`` and ``supplier_id`` are
        copied; the stored ID and creation date are left alone.
        """
        existing = self.get_product(candidate.id)
        self._check_fields(candidate)

        existing.name = candidate.name
        existing.quantity = candidate.quantity
        existing.unit_price = candidate.unit_price
        existing.supplier_id = candidate.supplier_id
        existing.date_of_last_update = self._clock.now()
        self._product_repo.save(existing)
        logger.info("Product %s updated", existing.id)
        return PRODUCT_UPDATED

    def delete_product(self, product_id: int) -> str:
        existing = self.get_product(product_id)
        self._product_repo.delete(existing)
        logger.info("Product %s deleted", product_id)
        return PRODUCT_DELETED

    def update_quantity(self, product_id: int, new_quantity: int) -> str:
        """Set the stock level of a product.

        Unlike ``update_product`` this leaves ``date_of_last_update`` as is.
        """
        existing = self.get_product(product_id)
        if not _is_whole_number(new_quantity) or new_quantity < 0:
            logger.warning("Rejected stock %r for product %s", new_quantity, product_id)
            raise InvalidArgumentError("Stock number must not be negative")

        existing.quantity = new_quantity
        self._product_repo.save(existing)
        logger.info("Product %s stock set to %d", product_id, new_quantity)
        return STOCK_UPDATED

    # --- Validation -----------------------------------------------------------

    def _check_fields(self, product: Product) -> None:
        if not product.name or not product.name.strip():
            self._reject("Product name is required")
        if not _is_whole_number(product.quantity) or product.quantity < 0:
            self._reject("Product quantity must not be negative")
        if not _is_positive_amount(product.unit_price):
            self._reject("Product price must be greater than zero")

    @staticmethod
    def _reject(message: str) -> NoReturn:
        logger.warning("Validation failed: %s", message)
        raise ValidationError(message)


def _is_whole_number(value: object) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def _is_positive_amount(value: object) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return False
    return amount.is_finite() and amount > 0
