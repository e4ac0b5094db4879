"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from ams.application.dto import ProductDTO, product_to_dto
from ams.domain.exceptions import EntityNotFoundError, ValidationError
from ams.domain.model.product import Product
from ams.domain.model.value_objects import Money
from ams.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        owner_id: str,
        name: str,
        category: str,
        material: str,
        image: str,
        price: str,
        quantity: int,
        description: str,
    ) -> ProductDTO:
        """List a new product.  It stays pending until approved."""
        with self._uow as uow:
            owner = uow.users.get_by_id(owner_id)
            if owner is None:
                raise EntityNotFoundError(f"User with ID '{owner_id}' not found")
            if not owner.can_upload_products:
                raise ValidationError(
                    f"{owner.role.value} is not allowed to upload products."
                )

            product = Product.create(
                product_id=uow.products.next_id(),
                owner_id=owner.id,
                uploaded_by=owner.role.value,
                name=name,
                category=category,
                material=material,
                image=image,
                old_price=Money.of(price),
                quantity=quantity,
                description=description,
            )
            uow.products.save(product)
            uow.commit()

        logger.info("Product #%s '%s' listed by user %s", product.id, product.name, owner_id)
        return product_to_dto(product)
