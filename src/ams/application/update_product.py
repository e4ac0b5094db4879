"""Application service: Update Product use case."""

from __future__ import annotations

from ams.domain.exceptions import EntityNotFoundError
from ams.domain.model.value_objects import Money
from ams.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        category: str | None = None,
        material: str | None = None,
        image: str | None = None,
        description: str | None = None,
        price: str | None = None,
    ) -> None:
        """Edit a listing's details.

        This does NOT affect any existing orders; they captured a
        product snapshot at checkout time.
        """
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            product.update_details(
                name=name,
                category=category,
                material=material,
                image=image,
                description=description,
                old_price=Money.of(price) if price is not None else None,
            )
            uow.products.save(product)
            uow.commit()
