"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP layers and the application layer
without exposing domain internals to the outside world.  Monetary values
are pre-formatted strings (e.g. "₹15.00") except where a caller needs the
number itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ams.domain.model.cart import Cart
from ams.domain.model.custom_request import CustomRequest
from ams.domain.model.order import Order
from ams.domain.model.product import Product
from ams.domain.model.ticket import Ticket
from ams.domain.model.user import User
from ams.domain.model.workshop import Workshop


@dataclass(frozen=True)
class PlacedOrderDTO:
    """Output of a successful checkout."""

    success: bool
    message: str
    order_id: int
    order_total: Decimal
    item_count: int


@dataclass(frozen=True)
class OrderLineDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    status: str
    payment_status: str
    payment_id: str | None
    delivery_person_id: str | None
    items: list[OrderLineDTO]
    total: str
    purchased_at: str


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartLineDTO]
    amount: str
    item_count: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    owner_id: str
    name: str
    category: str
    material: str
    old_price: str
    new_price: str
    quantity: int
    status: str


@dataclass(frozen=True)
class PaginationDTO:
    current_page: int
    total_pages: int
    total_products: int
    has_next_page: bool
    has_prev_page: bool


@dataclass(frozen=True)
class ProductPageDTO:
    products: list[ProductDTO]
    pagination: PaginationDTO


@dataclass(frozen=True)
class UserDTO:
    id: str
    username: str
    name: str
    email: str
    role: str


@dataclass(frozen=True)
class TicketDTO:
    id: str
    user_id: str
    subject: str
    category: str
    description: str
    status: str
    created_at: str


@dataclass(frozen=True)
class WorkshopDTO:
    id: str
    user_id: str
    title: str
    description: str
    date: str
    time: str
    status: str
    artisan_id: str | None


@dataclass(frozen=True)
class CustomRequestDTO:
    id: str
    user_id: str
    title: str
    type: str
    description: str
    budget: str
    required_by: str
    artisan_id: str | None
    is_accepted: bool


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        payment_status=order.payment_status.value,
        payment_id=order.payment_id,
        delivery_person_id=order.delivery_person_id,
        items=[
            OrderLineDTO(
                product_name=line.product.name,
                quantity=line.quantity.value,
                unit_price=str(line.product.new_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
        total=str(order.money),
        purchased_at=order.purchased_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        owner_id=product.owner_id,
        name=product.name,
        category=product.category,
        material=product.material,
        old_price=str(product.old_price),
        new_price=str(product.new_price),
        quantity=product.quantity,
        status=product.status.value,
    )


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        username=user.username,
        name=user.name,
        email=user.email,
        role=user.role.value,
    )


def empty_cart_dto(user_id: str) -> CartDTO:
    return CartDTO(user_id=user_id, items=[], amount="₹0.00", item_count=0)


def cart_to_dto(cart: Cart, products: dict[str, Product]) -> CartDTO:
    """Map a cart, skipping lines whose product is no longer listed."""
    lines: list[CartLineDTO] = []
    amount = None
    for item in cart.items:
        product = products.get(item.product_id)
        if product is None:
            continue
        line_total = product.new_price * item.quantity
        amount = line_total if amount is None else amount + line_total
        lines.append(
            CartLineDTO(
                product_id=product.id,
                product_name=product.name,
                quantity=item.quantity,
                unit_price=str(product.new_price),
                line_total=str(line_total),
            )
        )
    if amount is None:
        return empty_cart_dto(cart.user_id)
    return CartDTO(
        user_id=cart.user_id,
        items=lines,
        amount=str(amount),
        item_count=len(lines),
    )


def ticket_to_dto(ticket: Ticket) -> TicketDTO:
    return TicketDTO(
        id=ticket.id,
        user_id=ticket.user_id,
        subject=ticket.subject,
        category=ticket.category,
        description=ticket.description,
        status=ticket.status.value,
        created_at=ticket.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def workshop_to_dto(workshop: Workshop) -> WorkshopDTO:
    return WorkshopDTO(
        id=workshop.id,
        user_id=workshop.user_id,
        title=workshop.title,
        description=workshop.description,
        date=workshop.date,
        time=workshop.time,
        status=workshop.status.value,
        artisan_id=workshop.artisan_id,
    )


def request_to_dto(request: CustomRequest) -> CustomRequestDTO:
    return CustomRequestDTO(
        id=request.id,
        user_id=request.user_id,
        title=request.title,
        type=request.kind,
        description=request.description,
        budget=str(request.budget),
        required_by=request.required_by.isoformat(),
        artisan_id=request.artisan_id,
        is_accepted=request.is_accepted,
    )
