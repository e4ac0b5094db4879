"""CLI commands for delivery personnel."""

from __future__ import annotations

import click

from ams.application.deliveries import (
    AcceptDeliveryHandler,
    AvailableDeliveriesHandler,
    CompleteDeliveryHandler,
    ListDeliveryOrdersHandler,
)
from ams.application.dto import OrderDTO
from ams.domain.exceptions import DomainException
from ams.infrastructure.bootstrap import unit_of_work

_courier_option = click.option(
    "--courier", "courier_id", required=True, help="Delivery person's user ID."
)


def _list(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders found.")
        return
    click.echo(f"{'ID':<6} {'Customer':<10} {'Status':<10} {'Total':>12}")
    click.echo("-" * 41)
    for o in orders:
        click.echo(f"{o.id:<6} {o.user_id:<10} {o.status:<10} {o.total:>12}")


@click.command("available")
def delivery_available() -> None:
    """Orders waiting for a courier."""
    _list(AvailableDeliveriesHandler(unit_of_work()).handle())


@click.command("mine")
@_courier_option
def delivery_mine(courier_id: str) -> None:
    """Orders assigned to a courier."""
    _list(ListDeliveryOrdersHandler(unit_of_work()).handle(courier_id))


@click.command("accept")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@_courier_option
def delivery_accept(order_id: int, courier_id: str) -> None:
    """Pick up an order for delivery."""
    try:
        dto = AcceptDeliveryHandler(unit_of_work()).handle(order_id, courier_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} assigned to {courier_id} (status={dto.status})")


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@_courier_option
def delivery_complete(order_id: int, courier_id: str) -> None:
    """Mark an assigned order as delivered."""
    try:
        CompleteDeliveryHandler(unit_of_work()).handle(order_id, courier_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} delivered.")
