"""Application service: List Products use case (catalog query).

Customers only ever see approved listings.  Category and material
filters match case-insensitively, with ``_`` standing in for a space so
URL-friendly values like ``hand_made`` find "hand made".
"""

from __future__ import annotations

import math

from ams.application.dto import PaginationDTO, ProductPageDTO, product_to_dto
from ams.domain.exceptions import ValidationError
from ams.domain.model.product import Product, ProductStatus
from ams.domain.repository.unit_of_work import UnitOfWork


def _normalise(value: str) -> str:
    return value.replace("_", " ").strip().lower()


def _matches(value: str, wanted: list[str] | None) -> bool:
    if not wanted:
        return True
    return _normalise(value) in {_normalise(w) for w in wanted}


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        categories: list[str] | None = None,
        materials: list[str] | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> ProductPageDTO:
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive")

        with self._uow as uow:
            matching: list[Product] = [
                p
                for p in uow.products.list_all()
                if p.status == ProductStatus.APPROVED
                and _matches(p.category, categories)
                and _matches(p.material, materials)
            ]

        total = len(matching)
        start = (page - 1) * limit
        return ProductPageDTO(
            products=[product_to_dto(p) for p in matching[start:start + limit]],
            pagination=PaginationDTO(
                current_page=page,
                total_pages=math.ceil(total / limit),
                total_products=total,
                has_next_page=page * limit < total,
                has_prev_page=page > 1,
            ),
        )
