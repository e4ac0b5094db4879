"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from ams.domain.model.lifecycle import RecordState
from ams.domain.model.product import Product, ProductStatus
from ams.domain.model.value_objects import Money
from ams.domain.repository.product_repository import ProductRepository
from ams.infrastructure.persistence.json_collection import JsonCollection


class JsonProductRepository(ProductRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        ids = [int(raw["id"]) for raw in self._collection.records]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._collection.find("id", product_id)
        if raw is None or raw["state"] != RecordState.ACTIVE.value:
            return None
        return self._to_domain(raw)

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._active()]

    def list_by_owner(self, owner_id: str) -> list[Product]:
        return [
            self._to_domain(raw) for raw in self._active() if raw["owner_id"] == owner_id
        ]

    def save(self, product: Product) -> None:
        self._collection.upsert("id", self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    def _active(self) -> list[dict]:
        return [
            raw for raw in self._collection.records
            if raw["state"] == RecordState.ACTIVE.value
        ]

    @staticmethod
    def _to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "owner_id": p.owner_id,
            "uploaded_by": p.uploaded_by,
            "name": p.name,
            "category": p.category,
            "material": p.material,
            "image": p.image,
            "old_price": str(p.old_price.amount),
            "new_price": str(p.new_price.amount),
            "currency": p.old_price.currency,
            "quantity": p.quantity,
            "description": p.description,
            "status": p.status.value,
            "state": p.state.value,
            "created_at": p.created_at.isoformat(),
            "updated_at": p.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "INR")
        return Product(
            id=raw["id"],
            owner_id=raw["owner_id"],
            uploaded_by=raw["uploaded_by"],
            name=raw["name"],
            category=raw["category"],
            material=raw["material"],
            image=raw["image"],
            old_price=Money(Decimal(raw["old_price"]), currency),
            new_price=Money(Decimal(raw["new_price"]), currency),
            quantity=raw["quantity"],
            description=raw["description"],
            status=ProductStatus(raw["status"]),
            state=RecordState(raw["state"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
