"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from ams.domain.model.lifecycle import RecordState
from ams.domain.model.order import (
    Order,
    OrderLine,
    OrderStatus,
    PaymentStatus,
    ProductSnapshot,
)
from ams.domain.model.value_objects import Money, Quantity
from ams.domain.repository.order_repository import OrderRepository
from ams.infrastructure.persistence.json_collection import JsonCollection


class JsonOrderRepository(OrderRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._collection.records
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        raw = self._collection.find("id", order_id)
        if raw is None or raw["state"] != RecordState.ACTIVE.value:
            return None
        return self._to_domain(raw)

    def list_all(self) -> list[Order]:
        return [
            self._to_domain(raw) for raw in self._collection.records
            if raw["state"] == RecordState.ACTIVE.value
        ]

    def list_by_user(self, user_id: str) -> list[Order]:
        orders = [o for o in self.list_all() if o.user_id == user_id]
        return sorted(orders, key=lambda o: o.purchased_at, reverse=True)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._collection.upsert("id", self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "delivery_person_id": order.delivery_person_id,
            "money": str(order.money.amount),
            "currency": order.money.currency,
            "purchased_at": order.purchased_at.isoformat(),
            "status": order.status.value,
            "payment_id": order.payment_id,
            "payment_status": order.payment_status.value,
            "state": order.state.value,
            "updated_at": order.updated_at.isoformat(),
            "products": [
                {
                    "product": {
                        "name": line.product.name,
                        "category": line.product.category,
                        "material": line.product.material,
                        "image": line.product.image,
                        "old_price": str(line.product.old_price.amount),
                        "new_price": str(line.product.new_price.amount),
                        "quantity": line.product.quantity,
                        "description": line.product.description,
                    },
                    "quantity": line.quantity.value,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "INR")
        lines = [
            OrderLine(
                product=ProductSnapshot(
                    name=p["product"]["name"],
                    category=p["product"]["category"],
                    material=p["product"]["material"],
                    image=p["product"]["image"],
                    old_price=Money(Decimal(p["product"]["old_price"]), currency),
                    new_price=Money(Decimal(p["product"]["new_price"]), currency),
                    quantity=p["product"]["quantity"],
                    description=p["product"]["description"],
                ),
                quantity=Quantity(p["quantity"]),
            )
            for p in raw["products"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            lines=lines,
            money=Money(Decimal(raw["money"]), currency),
            purchased_at=datetime.fromisoformat(raw["purchased_at"]),
            status=OrderStatus(raw["status"]),
            delivery_person_id=raw.get("delivery_person_id"),
            payment_id=raw.get("payment_id"),
            payment_status=PaymentStatus(raw.get("payment_status", "unpaid")),
            state=RecordState(raw["state"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
