"""Catalog storage port.

Lookups only ever return ACTIVE products; retired listings stay in storage
for history but are invisible here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ams.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return an active product by its ID, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every active product in the catalog."""

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> list[Product]:
        """Return the active products listed by one user."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
