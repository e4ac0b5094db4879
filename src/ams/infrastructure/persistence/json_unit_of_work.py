"""JSON-file-backed Unit of Work.

``begin()`` takes a per-directory lock and loads every collection into
memory; the repositories then read and write only that in-memory copy.
``commit()`` stages every changed collection to a temp file first and
only then moves the temp files into place.  If staging fails nothing has
been replaced.  If a move fails, the files already moved get back the
contents loaded by ``begin()`` and every leftover temp file is deleted,
so a failed commit leaves the data directory as it found it.  A process
killed in the middle of the moves is not covered.  ``rollback()`` drops
the in-memory copy and releases the lock.

The lock serialises units of work within one process.  Separate
processes sharing a data directory are not coordinated.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from ams.domain.repository.unit_of_work import UnitOfWork
from ams.infrastructure.persistence.json_cart_repository import JsonCartRepository
from ams.infrastructure.persistence.json_collection import JsonCollection, discard_temp
from ams.infrastructure.persistence.json_custom_request_repository import (
    JsonCustomRequestRepository,
)
from ams.infrastructure.persistence.json_order_repository import JsonOrderRepository
from ams.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ams.infrastructure.persistence.json_ticket_repository import JsonTicketRepository
from ams.infrastructure.persistence.json_user_repository import JsonUserRepository
from ams.infrastructure.persistence.json_workshop_repository import (
    JsonWorkshopRepository,
)

logger = logging.getLogger(__name__)

_COLLECTIONS = (
    "products", "carts", "orders", "users", "tickets", "workshops", "requests",
)

_locks: dict[Path, threading.Lock] = {}
_locks_guard = threading.Lock()


def _lock_for(data_dir: Path) -> threading.Lock:
    key = data_dir.resolve()
    with _locks_guard:
        return _locks.setdefault(key, threading.Lock())


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._lock = _lock_for(data_dir)
        self._collections: dict[str, JsonCollection] | None = None

    def begin(self) -> None:
        if self._collections is not None:
            raise RuntimeError("Unit of work is already in progress")
        self._lock.acquire()
        try:
            self._collections = {
                name: JsonCollection(self._data_dir / f"{name}.json")
                for name in _COLLECTIONS
            }
        except Exception:
            self._lock.release()
            raise
        self.products = JsonProductRepository(self._collections["products"])
        self.carts = JsonCartRepository(self._collections["carts"])
        self.orders = JsonOrderRepository(self._collections["orders"])
        self.users = JsonUserRepository(self._collections["users"])
        self.tickets = JsonTicketRepository(self._collections["tickets"])
        self.workshops = JsonWorkshopRepository(self._collections["workshops"])
        self.requests = JsonCustomRequestRepository(self._collections["requests"])

    def commit(self) -> None:
        if self._collections is None:
            raise RuntimeError("No unit of work in progress")

        staged: list[tuple[JsonCollection, Path]] = []
        try:
            for collection in self._collections.values():
                path = collection.stage()
                if path is not None:
                    staged.append((collection, path))
        except Exception:
            for _, path in staged:
                discard_temp(path)
            raise

        published: list[JsonCollection] = []
        try:
            for collection, path in staged:
                collection.publish(path)
                published.append(collection)
        except Exception:
            for collection in published:
                collection.restore()
            for _, path in staged:
                discard_temp(path)
            logger.error(
                "Commit failed; restored %s",
                ", ".join(c.name for c in published) or "nothing",
            )
            raise
        logger.debug(
            "Committed %s", ", ".join(c.name for c, _ in staged) or "nothing"
        )

    def rollback(self) -> None:
        if self._collections is None:
            return
        pending = [c.name for c in self._collections.values() if c.dirty]
        if pending:
            logger.debug("Rolled back uncommitted changes to %s", ", ".join(pending))
        self._collections = None
        self._lock.release()
