"""Application service: Review Product use case (moderation)."""

from __future__ import annotations

import logging

from ams.domain.exceptions import EntityNotFoundError
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class ReviewProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def approve(self, product_id: str) -> None:
        self._review(product_id, approved=True)

    def disapprove(self, product_id: str) -> None:
        self._review(product_id, approved=False)

    def _review(self, product_id: str, approved: bool) -> None:
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            if approved:
                product.approve()
            else:
                product.disapprove()
            uow.products.save(product)
            uow.commit()

        logger.info("Product #%s %s", product_id, product.status.value)
