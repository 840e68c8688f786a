"""Pagination value objects shared by the manager and repositories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from catalog.domain.exceptions import InvalidArgumentError
from catalog.domain.model.product import Product


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index plus the number of entries per page."""

    page_index: int
    page_size: int

    def __post_init__(self) -> None:
        if self.page_index < 0:
            raise InvalidArgumentError("Page index must not be less than zero")
        if self.page_size < 1:
            raise InvalidArgumentError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size


@dataclass(frozen=True)
class Page:
    """One slice of the catalog and where it sits in the whole."""

    items: list[Product] = field(default_factory=list)
    page_index: int = 0
    page_size: int = 1
    total_elements: int = 0

    def __iter__(self) -> Iterator[Product]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def number_of_elements(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        # ceiling division
        return -(-self.total_elements // self.page_size)

    @property
    def is_first(self) -> bool:
        return self.page_index == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.page_index + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0
