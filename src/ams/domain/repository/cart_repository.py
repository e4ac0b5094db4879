"""Abstract repository for Cart aggregate.

Carts are keyed by their owner: one cart per user.  Unlike the other
aggregates, carts are physically deleted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ams.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_user(self, user_id: str) -> Cart | None:
        """Return the user's cart, or None if they have none."""

    @abstractmethod
    def list_containing(self, product_id: str) -> list[Cart]:
        """Return every cart holding a line for the product."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist a new or updated cart."""

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Delete the user's cart.  Returns False if there was none."""
