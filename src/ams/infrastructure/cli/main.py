import click

from ams.infrastructure.bootstrap import settings
from ams.infrastructure.cli.cart_commands import (
    cart_add,
    cart_drop,
    cart_remove,
    cart_set,
    cart_show,
)
from ams.infrastructure.cli.delivery_commands import (
    delivery_accept,
    delivery_available,
    delivery_complete,
    delivery_mine,
)
from ams.infrastructure.cli.order_commands import (
    order_list,
    order_pay,
    order_place,
    order_retire,
    order_show,
    order_status,
)
from ams.infrastructure.cli.product_commands import (
    product_add,
    product_approve,
    product_disapprove,
    product_list,
    product_restock,
    product_retire,
    product_update,
)
from ams.infrastructure.cli.report_commands import report_sales
from ams.infrastructure.cli.request_commands import (
    request_approve,
    request_list,
    request_remove,
    request_submit,
)
from ams.infrastructure.cli.ticket_commands import (
    ticket_list,
    ticket_raise,
    ticket_remove,
    ticket_status,
)
from ams.infrastructure.cli.user_commands import user_add, user_retire
from ams.infrastructure.cli.workshop_commands import (
    workshop_accept,
    workshop_book,
    workshop_list,
    workshop_remove,
)
from ams.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """AMS: Artisan Marketplace System"""
    configure_logging("DEBUG" if verbose else settings().log_level)


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def cart() -> None:
    """Manage a customer's cart."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def delivery() -> None:
    """Delivery assignments."""


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def report() -> None:
    """Business reports."""


@cli.group()
def ticket() -> None:
    """Support tickets."""


@cli.group()
def workshop() -> None:
    """Book and host workshops."""


@cli.group("request")
def custom_request() -> None:
    """Custom order requests."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Start the HTTP API server."""
    import uvicorn

    from ams.infrastructure.api import app

    click.echo(f"Data directory: {settings().data_dir}")
    click.echo(f"API docs: http://{host}:{port}/docs")
    uvicorn.run(app, host=host, port=port, workers=1)


# Register subcommands
order.add_command(order_list)
order.add_command(order_pay)
order.add_command(order_place)
order.add_command(order_retire)
order.add_command(order_show)
order.add_command(order_status)
cart.add_command(cart_add)
cart.add_command(cart_drop)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
product.add_command(product_add)
product.add_command(product_approve)
product.add_command(product_disapprove)
product.add_command(product_list)
product.add_command(product_restock)
product.add_command(product_retire)
product.add_command(product_update)
delivery.add_command(delivery_accept)
delivery.add_command(delivery_available)
delivery.add_command(delivery_complete)
delivery.add_command(delivery_mine)
user.add_command(user_add)
user.add_command(user_retire)
report.add_command(report_sales)
ticket.add_command(ticket_list)
ticket.add_command(ticket_raise)
ticket.add_command(ticket_remove)
ticket.add_command(ticket_status)
workshop.add_command(workshop_accept)
workshop.add_command(workshop_book)
workshop.add_command(workshop_list)
workshop.add_command(workshop_remove)
custom_request.add_command(request_approve)
custom_request.add_command(request_list)
custom_request.add_command(request_remove)
custom_request.add_command(request_submit)
