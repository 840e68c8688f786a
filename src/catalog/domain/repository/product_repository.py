"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.page import Page, PageRequest
from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product.

        A product without an ID is assigned one; the saved product is
        returned.
        """

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove a persisted product."""

    @abstractmethod
    def find_page(self, request: PageRequest) -> Page:
        """Return one page of products ordered by ascending ID."""
