"""CLI commands for custom order requests."""

from __future__ import annotations

import click

from ams.application.custom_requests import (
    ApproveRequestHandler,
    ListRequestsHandler,
    RemoveRequestHandler,
    SubmitRequestHandler,
)
from ams.domain.exceptions import DomainException
from ams.infrastructure.bootstrap import unit_of_work


@click.command("submit")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--title", required=True)
@click.option("--type", "kind", required=True, help="Kind of piece, e.g. pottery.")
@click.option("--description", default="")
@click.option("--budget", required=True, help="e.g. 2500.00")
@click.option("--required-by", required=True, help="YYYY-MM-DD")
@click.option("--image", default="")
def request_submit(
    user_id: str,
    title: str,
    kind: str,
    description: str,
    budget: str,
    required_by: str,
    image: str,
) -> None:
    """Ask artisans for a custom piece."""
    try:
        dto = SubmitRequestHandler(unit_of_work()).handle(
            user_id, title, kind, description, budget, required_by, image
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Request #{dto.id} submitted with budget {dto.budget}.")


@click.command("list")
@click.option("--accepted/--open", "accepted", default=None, help="Filter by pickup.")
@click.option("--artisan", "artisan_id", default=None, help="Taken by this artisan.")
def request_list(accepted: bool | None, artisan_id: str | None) -> None:
    """List custom requests."""
    requests = ListRequestsHandler(unit_of_work()).handle(accepted, artisan_id)
    if not requests:
        click.echo("No requests found.")
        return
    click.echo(f"{'ID':<6} {'Type':<12} {'Budget':>12} {'Due':<11} {'Artisan':<8} Title")
    click.echo("-" * 66)
    for r in requests:
        artisan = r.artisan_id or "-"
        click.echo(
            f"{r.id:<6} {r.type:<12} {r.budget:>12} {r.required_by:<11} "
            f"{artisan:<8} {r.title}"
        )


@click.command("approve")
@click.option("--id", "request_id", required=True, help="Request ID.")
@click.option("--artisan", "artisan_id", required=True, help="Artisan's user ID.")
def request_approve(request_id: str, artisan_id: str) -> None:
    """Take on a custom request."""
    try:
        ApproveRequestHandler(unit_of_work()).handle(request_id, artisan_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Request approved successfully!")


@click.command("remove")
@click.option("--id", "request_id", required=True, help="Request ID.")
def request_remove(request_id: str) -> None:
    """Remove a custom request."""
    try:
        message = RemoveRequestHandler(unit_of_work()).handle(request_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)
