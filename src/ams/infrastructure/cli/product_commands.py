"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ams.application.add_product import AddProductHandler
from ams.application.list_products import ListProductsHandler
from ams.application.restock_product import RestockProductHandler
from ams.application.retire_product import RetireProductHandler
from ams.application.review_product import ReviewProductHandler
from ams.application.update_product import UpdateProductHandler
from ams.domain.exceptions import DomainException
from ams.infrastructure.bootstrap import unit_of_work

_id_option = click.option("--id", "product_id", required=True, help="Product ID.")


@click.command("add")
@click.option("--owner", "owner_id", required=True, help="Uploading artisan/manager user ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True)
@click.option("--material", required=True)
@click.option("--image", default="", help="Image URL.")
@click.option("--price", required=True, help="List price (e.g. 499.00).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--description", default="")
def product_add(
    owner_id: str,
    name: str,
    category: str,
    material: str,
    image: str,
    price: str,
    quantity: int,
    description: str,
) -> None:
    """List a new product (pending approval)."""
    handler = AddProductHandler(unit_of_work())

    try:
        product = handler.handle(
            owner_id=owner_id,
            name=name,
            category=category,
            material=material,
            image=image,
            price=price,
            quantity=quantity,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' listed at {product.old_price} "
        f"(sells for {product.new_price}), pending approval"
    )


@click.command("list")
@click.option("--category", "categories", multiple=True, help="Filter by category.")
@click.option("--material", "materials", multiple=True, help="Filter by material.")
@click.option("--page", default=1, show_default=True, type=int)
@click.option("--limit", default=10, show_default=True, type=int)
def product_list(categories: tuple[str, ...], materials: tuple[str, ...], page: int, limit: int) -> None:
    """List approved products in the catalog."""
    try:
        result = ListProductsHandler(unit_of_work()).handle(
            categories=list(categories),
            materials=list(materials),
            page=page,
            limit=limit,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<12} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 58)
    for p in result.products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<12} {p.new_price:>10} {p.quantity:>6}")
    page_info = result.pagination
    click.echo(
        f"Page {page_info.current_page}/{page_info.total_pages} "
        f"({page_info.total_products} products)"
    )


@click.command("update")
@_id_option
@click.option("--name", default=None)
@click.option("--category", default=None)
@click.option("--material", default=None)
@click.option("--image", default=None)
@click.option("--description", default=None)
@click.option("--price", default=None, help="New list price (e.g. 29.99).")
def product_update(
    product_id: str,
    name: str | None,
    category: str | None,
    material: str | None,
    image: str | None,
    description: str | None,
    price: str | None,
) -> None:
    """Edit a product's details."""
    handler = UpdateProductHandler(unit_of_work())

    try:
        handler.handle(
            product_id=product_id,
            name=name,
            category=category,
            material=material,
            image=image,
            description=description,
            price=price,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")


@click.command("approve")
@_id_option
def product_approve(product_id: str) -> None:
    """Approve a listing so customers can buy it."""
    try:
        ReviewProductHandler(unit_of_work()).approve(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} approved")


@click.command("disapprove")
@_id_option
def product_disapprove(product_id: str) -> None:
    """Reject a listing."""
    try:
        ReviewProductHandler(unit_of_work()).disapprove(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} disapproved")


@click.command("retire")
@_id_option
def product_retire(product_id: str) -> None:
    """Retire a listing and pull it from every cart."""
    try:
        RetireProductHandler(unit_of_work()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} retired")


@click.command("restock")
@_id_option
@click.option("--quantity", required=True, type=int, help="New stock level.")
def product_restock(product_id: str, quantity: int) -> None:
    """Set a product's stock level."""
    try:
        RestockProductHandler(unit_of_work()).handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for product #{product_id} set to {quantity}")
