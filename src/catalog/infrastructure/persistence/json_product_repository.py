"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.page import Page, PageRequest
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def save(self, product: Product) -> Product:
        products = self._load()
        if product.id is None:
            product.id = max(products, default=0) + 1
        products[product.id] = product
        self._persist(products)
        return product

    def delete(self, product: Product) -> None:
        products = self._load()
        products.pop(product.id, None)
        self._persist(products)

    def find_page(self, request: PageRequest) -> Page:
        products = self._load()
        ordered = [products[key] for key in sorted(products)]
        return Page(
            items=ordered[request.offset:request.offset + request.page_size],
            page_index=request.page_index,
            page_size=request.page_size,
            total_elements=len(ordered),
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "quantity": product.quantity,
            "unit_price": str(product.unit_price),
            "supplier_id": product.supplier_id,
            "date_of_creation": _iso(product.date_of_creation),
            "date_of_last_update": _iso(product.date_of_last_update),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            quantity=raw["quantity"],
            unit_price=Decimal(raw["unit_price"]),
            supplier_id=raw.get("supplier_id"),
            date_of_creation=_parse_iso(raw.get("date_of_creation")),
            date_of_last_update=_parse_iso(raw.get("date_of_last_update")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [self._to_raw(products[key]) for key in sorted(products)]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_iso(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
