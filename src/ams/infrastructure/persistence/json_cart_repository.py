"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from datetime import datetime

from ams.domain.model.cart import Cart, CartItem
from ams.domain.repository.cart_repository import CartRepository
from ams.infrastructure.persistence.json_collection import JsonCollection


class JsonCartRepository(CartRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    # --- CartRepository interface ---------------------------------------------

    def get_by_user(self, user_id: str) -> Cart | None:
        raw = self._collection.find("user_id", user_id)
        return self._to_domain(raw) if raw is not None else None

    def list_containing(self, product_id: str) -> list[Cart]:
        return [
            self._to_domain(raw)
            for raw in self._collection.records
            if any(i["product_id"] == product_id for i in raw["products"])
        ]

    def save(self, cart: Cart) -> None:
        self._collection.upsert("user_id", self._to_raw(cart))

    def delete(self, user_id: str) -> bool:
        return self._collection.remove("user_id", user_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "user_id": cart.user_id,
            "products": [
                {"product_id": i.product_id, "quantity": i.quantity} for i in cart.items
            ],
            "created_at": cart.created_at.isoformat(),
            "updated_at": cart.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            user_id=raw["user_id"],
            items=[
                CartItem(product_id=i["product_id"], quantity=i["quantity"])
                for i in raw["products"]
            ],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
