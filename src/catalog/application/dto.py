"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from catalog.domain.model.page import Page
from catalog.domain.model.product import Product


def _format_date(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value is not None else "-"


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    supplier_id: str
    created_at: str
    updated_at: str

    @classmethod
    def from_product(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            quantity=product.quantity,
            unit_price=f"${product.unit_price:.2f}",
            supplier_id="-" if product.supplier_id is None else str(product.supplier_id),
            created_at=_format_date(product.date_of_creation),
            updated_at=_format_date(product.date_of_last_update),
        )


@dataclass(frozen=True)
class PageDTO:
    """Output: one page of products plus its position in the catalog."""

    items: list[ProductDTO]
    page_number: int  # one-based, for display
    total_pages: int
    total_elements: int

    @classmethod
    def from_page(cls, page: Page) -> PageDTO:
        return cls(
            items=[ProductDTO.from_product(p) for p in page],
            page_number=page.page_index + 1,
            total_pages=page.total_pages,
            total_elements=page.total_elements,
        )
