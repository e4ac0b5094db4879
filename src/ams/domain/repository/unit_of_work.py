"""Abstract Unit of Work.

A unit of work groups every read and write of one use case into a single
transaction.  It is used as a context manager::

    with uow:
        ...
        uow.commit()

Leaving the block without ``commit()``, or because of an exception,
rolls back every write made inside it.  The repositories are only valid
inside the block.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ams.domain.repository.cart_repository import CartRepository
from ams.domain.repository.custom_request_repository import CustomRequestRepository
from ams.domain.repository.order_repository import OrderRepository
from ams.domain.repository.product_repository import ProductRepository
from ams.domain.repository.ticket_repository import TicketRepository
from ams.domain.repository.user_repository import UserRepository
from ams.domain.repository.workshop_repository import WorkshopRepository


class UnitOfWork(ABC):

    products: ProductRepository
    carts: CartRepository
    orders: OrderRepository
    users: UserRepository
    tickets: TicketRepository
    workshops: WorkshopRepository
    requests: CustomRequestRepository

    def __enter__(self) -> UnitOfWork:
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # No-op when commit() already ran
        self.rollback()

    @abstractmethod
    def begin(self) -> None:
        """Open the transaction and bind the repositories to it."""

    @abstractmethod
    def commit(self) -> None:
        """Make every write since ``begin()`` durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted write."""
