"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ams.application.change_order_status import ChangeOrderStatusHandler
from ams.application.dto import OrderDTO
from ams.application.list_orders import ListAllOrdersHandler, ListUserOrdersHandler
from ams.application.place_order import PlaceOrderHandler
from ams.application.record_payment import RecordPaymentHandler
from ams.application.retire_order import RetireOrderHandler
from ams.application.show_order import ShowOrderHandler
from ams.domain.exceptions import DomainException
from ams.infrastructure.bootstrap import unit_of_work


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status}, payment={dto.payment_status})")
    click.echo(f"Customer: {dto.user_id}")
    click.echo(f"Placed:   {dto.purchased_at}")
    if dto.delivery_person_id:
        click.echo(f"Courier:  {dto.delivery_person_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total (incl. tax & shipping)':<34} {dto.total:>13}")


@click.command("place")
@click.option("--user", "user_id", required=True, help="ID of the customer checking out.")
def order_place(user_id: str) -> None:
    """Check out the user's cart."""
    handler = PlaceOrderHandler(unit_of_work())

    try:
        result = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(result.message)
    click.echo(f"Order #{result.order_id}: {result.item_count} item(s), total ₹{result.order_total:.2f}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(unit_of_work())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only this customer's orders.")
def order_list(user_id: str | None) -> None:
    """List orders, newest first when filtered by customer."""
    if user_id is not None:
        orders = ListUserOrdersHandler(unit_of_work()).handle(user_id)
    else:
        orders = ListAllOrdersHandler(unit_of_work()).handle()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<10} {'Status':<10} {'Payment':<8} {'Total':>12}")
    click.echo("-" * 50)
    for o in orders:
        click.echo(f"{o.id:<6} {o.user_id:<10} {o.status:<10} {o.payment_status:<8} {o.total:>12}")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--to",
    "status",
    required=True,
    type=click.Choice(["shipped", "delivered", "cancelled"]),
    help="New status.",
)
def order_status(order_id: int, status: str) -> None:
    """Move an order along its lifecycle."""
    handler = ChangeOrderStatusHandler(unit_of_work())

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {status}.")


@click.command("retire")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_retire(order_id: int) -> None:
    """Remove an order from all listings (kept on record)."""
    try:
        RetireOrderHandler(unit_of_work()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} retired.")


@click.command("pay")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--payment-id", required=True, help="Gateway payment reference.")
@click.option(
    "--status",
    required=True,
    type=click.Choice(["paid", "failed"]),
    help="Outcome reported by the gateway.",
)
def order_pay(order_id: int, payment_id: str, status: str) -> None:
    """Record a payment outcome against an order."""
    try:
        RecordPaymentHandler(unit_of_work()).handle(order_id, payment_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} payment {payment_id} recorded as {status}.")
