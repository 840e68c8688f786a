"""Product entity.

The catalog's only aggregate. Instances are transient: the manager either
receives one from the caller or loads one from the repository for the
duration of a single operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is None until the repository persists the product for the first
    time. ``date_of_creation`` is stamped once at creation and
    ``date_of_last_update`` on every full update.
    """

    name: str
    quantity: int
    unit_price: Decimal
    supplier_id: int | None = None
    id: int | None = None
    date_of_creation: datetime | None = None
    date_of_last_update: datetime | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
