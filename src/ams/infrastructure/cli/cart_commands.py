"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from ams.application.add_to_cart import AddToCartHandler
from ams.application.edit_cart import (
    ChangeCartQuantityHandler,
    RemoveCartLineHandler,
    RemoveOneFromCartHandler,
)
from ams.application.show_cart import ShowCartHandler
from ams.domain.exceptions import DomainException
from ams.infrastructure.bootstrap import unit_of_work

_user_option = click.option("--user", "user_id", required=True, help="Cart owner's user ID.")
_product_option = click.option("--product", "product_id", required=True, help="Product ID.")


@click.command("add")
@_user_option
@_product_option
@click.option("--quantity", default=1, show_default=True, type=click.IntRange(min=1))
def cart_add(user_id: str, product_id: str, quantity: int) -> None:
    """Add units of a product to the cart."""
    try:
        message = AddToCartHandler(unit_of_work()).handle(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("remove")
@_user_option
@_product_option
def cart_remove(user_id: str, product_id: str) -> None:
    """Take one unit of a product out of the cart."""
    try:
        message = RemoveOneFromCartHandler(unit_of_work()).handle(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("drop")
@_user_option
@_product_option
def cart_drop(user_id: str, product_id: str) -> None:
    """Remove a product from the cart entirely."""
    try:
        message = RemoveCartLineHandler(unit_of_work()).handle(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("set")
@_user_option
@_product_option
@click.option("--amount", required=True, type=click.IntRange(min=1), help="New quantity.")
def cart_set(user_id: str, product_id: str, amount: int) -> None:
    """Set the quantity of a cart line."""
    try:
        message = ChangeCartQuantityHandler(unit_of_work()).handle(user_id, product_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("show")
@_user_option
def cart_show(user_id: str) -> None:
    """Show the cart and its running amount."""
    dto = ShowCartHandler(unit_of_work()).handle(user_id)

    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.amount:>20}")
