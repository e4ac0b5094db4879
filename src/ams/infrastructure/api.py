"""FastAPI REST API for the marketplace.

Authentication happens upstream; the authenticated user's ID arrives in
the ``X-User-Id`` header.  Every endpoint opens its own unit of work
through the ``get_uow`` dependency, which tests override.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import Depends, FastAPI, Header, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ams.application.add_to_cart import AddToCartHandler
from ams.application.custom_requests import ListRequestsHandler, SubmitRequestHandler
from ams.application.list_orders import ListUserOrdersHandler
from ams.application.list_products import ListProductsHandler
from ams.application.place_order import PlaceOrderHandler
from ams.application.show_cart import ShowCartHandler
from ams.application.show_order import ShowOrderHandler
from ams.application.tickets import ListTicketsHandler, RaiseTicketHandler
from ams.application.workshops import (
    AcceptWorkshopHandler,
    BookWorkshopHandler,
    ListWorkshopsHandler,
)
from ams.domain.exceptions import (
    CheckoutError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from ams.domain.repository.unit_of_work import UnitOfWork
from ams.infrastructure.bootstrap import unit_of_work

logger = logging.getLogger(__name__)

app = FastAPI(title="Artisan Marketplace API", version="0.1.0")

ERROR_STATUS_CODES: dict[type, int] = {
    EntityNotFoundError: 404,
    ValidationError: 400,
    CheckoutError: 500,
}


def get_uow() -> UnitOfWork:
    return unit_of_work()


# --- Schemas ------------------------------------------------------------------


class AddToCartRequest(BaseModel):
    productId: str
    quantity: int = Field(default=1, ge=1)


class TicketRequest(BaseModel):
    subject: str
    category: str
    description: str


class WorkshopRequest(BaseModel):
    workshopTitle: str
    workshopDescription: str = ""
    date: str
    time: str


class CustomOrderRequest(BaseModel):
    title: str
    type: str
    description: str = ""
    budget: str
    requiredBy: str
    image: str = ""


# --- Error handling -----------------------------------------------------------


@app.exception_handler(DomainException)
async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Map domain errors to HTTP responses; checkout failures are 500s."""
    status_code = 500
    for error_type, code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            status_code = code
            break
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": str(exc)},
    )


# --- Endpoints ----------------------------------------------------------------


@app.get("/api/health")
def health_check():
    return {"status": "ok"}


@app.post("/api/orders/checkout")
def place_order(x_user_id: str = Header(...), uow: UnitOfWork = Depends(get_uow)):
    result = PlaceOrderHandler(uow).handle(x_user_id)
    return {
        "success": result.success,
        "message": result.message,
        "orderId": result.order_id,
        "orderTotal": float(result.order_total),
        "itemCount": result.item_count,
    }


@app.get("/api/orders")
def list_orders(x_user_id: str = Header(...), uow: UnitOfWork = Depends(get_uow)):
    orders = ListUserOrdersHandler(uow).handle(x_user_id)
    return {"success": True, "orders": [asdict(o) for o in orders]}


@app.get("/api/orders/{order_id}")
def get_order(order_id: int, uow: UnitOfWork = Depends(get_uow)):
    order = ShowOrderHandler(uow).handle(order_id)
    return {"success": True, "order": asdict(order)}


@app.get("/api/cart")
def get_cart(x_user_id: str = Header(...), uow: UnitOfWork = Depends(get_uow)):
    cart = ShowCartHandler(uow).handle(x_user_id)
    return {
        "success": True,
        "cart": [asdict(item) for item in cart.items],
        "amount": cart.amount,
        "itemCount": cart.item_count,
    }


@app.post("/api/cart/items")
def add_to_cart(
    body: AddToCartRequest,
    x_user_id: str = Header(...),
    uow: UnitOfWork = Depends(get_uow),
):
    message = AddToCartHandler(uow).handle(x_user_id, body.productId, body.quantity)
    return {"success": True, "message": message}


@app.get("/api/products")
def list_products(
    category: list[str] | None = Query(default=None),
    material: list[str] | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    uow: UnitOfWork = Depends(get_uow),
):
    result = ListProductsHandler(uow).handle(
        categories=category, materials=material, page=page, limit=limit
    )
    return {"success": True, **asdict(result)}


@app.post("/api/tickets")
def raise_ticket(
    body: TicketRequest,
    x_user_id: str = Header(...),
    uow: UnitOfWork = Depends(get_uow),
):
    ticket = RaiseTicketHandler(uow).handle(
        x_user_id, body.subject, body.category, body.description
    )
    return {"success": True, "ticket": asdict(ticket)}


@app.get("/api/tickets")
def list_tickets(x_user_id: str = Header(...), uow: UnitOfWork = Depends(get_uow)):
    tickets = ListTicketsHandler(uow).handle(x_user_id)
    return {"success": True, "tickets": [asdict(t) for t in tickets]}


@app.post("/api/workshops")
def book_workshop(
    body: WorkshopRequest,
    x_user_id: str = Header(...),
    uow: UnitOfWork = Depends(get_uow),
):
    workshop = BookWorkshopHandler(uow).handle(
        x_user_id, body.workshopTitle, body.workshopDescription, body.date, body.time
    )
    return {
        "success": True,
        "message": "Workshop booked successfully!",
        "workshop": asdict(workshop),
    }


@app.get("/api/workshops")
def list_workshops(
    status: str | None = Query(default=None),
    artisan_id: str | None = Query(default=None, alias="artisanId"),
    uow: UnitOfWork = Depends(get_uow),
):
    workshops = ListWorkshopsHandler(uow).handle(status=status, artisan_id=artisan_id)
    return {"success": True, "workshops": [asdict(w) for w in workshops]}


@app.post("/api/workshops/{workshop_id}/accept")
def accept_workshop(
    workshop_id: str,
    x_user_id: str = Header(...),
    uow: UnitOfWork = Depends(get_uow),
):
    workshop = AcceptWorkshopHandler(uow).handle(workshop_id, x_user_id)
    return {
        "success": True,
        "message": "Workshop accepted successfully!",
        "workshop": asdict(workshop),
    }


@app.post("/api/requests")
def submit_request(
    body: CustomOrderRequest,
    x_user_id: str = Header(...),
    uow: UnitOfWork = Depends(get_uow),
):
    request = SubmitRequestHandler(uow).handle(
        x_user_id,
        body.title,
        body.type,
        body.description,
        body.budget,
        body.requiredBy,
        body.image,
    )
    return {"success": True, "request": asdict(request)}


@app.get("/api/requests")
def list_requests(
    accepted: bool | None = Query(default=None, alias="isAccepted"),
    artisan_id: str | None = Query(default=None, alias="artisanId"),
    uow: UnitOfWork = Depends(get_uow),
):
    requests = ListRequestsHandler(uow).handle(accepted=accepted, artisan_id=artisan_id)
    return {"success": True, "requests": [asdict(r) for r in requests]}
