"""Application service: Record Payment use case.

Stores the outcome reported by the payment gateway against an order.
Verifying the gateway's signature happens before this is called.
"""

from __future__ import annotations

import logging

from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.order import PaymentStatus
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class RecordPaymentHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, payment_id: str, status: str) -> None:
        try:
            payment_status = PaymentStatus(status.lower())
        except ValueError as exc:
            raise ValidationError(f"{status} is not a valid payment status") from exc

        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            order.record_payment(payment_id, payment_status)
            uow.orders.save(order)
            uow.commit()

        logger.info("Order #%s payment %s: %s", order_id, payment_id, payment_status.value)
