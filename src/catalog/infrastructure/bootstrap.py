"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.product_manager import ProductManager
from catalog.domain.clock import SystemClock
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.products_file)


def product_manager(settings: Settings | None = None) -> ProductManager:
    return ProductManager(product_repository(settings), SystemClock())
