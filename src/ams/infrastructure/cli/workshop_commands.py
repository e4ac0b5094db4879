"""CLI commands for workshops."""

from __future__ import annotations

import click

from ams.application.dto import WorkshopDTO
from ams.application.workshops import (
    AcceptWorkshopHandler,
    BookWorkshopHandler,
    ListWorkshopsHandler,
    RemoveWorkshopHandler,
)
from ams.domain.exceptions import DomainException
from ams.domain.model.workshop import WorkshopStatus
from ams.infrastructure.bootstrap import unit_of_work

_artisan_option = click.option(
    "--artisan", "artisan_id", required=True, help="Artisan's user ID."
)


def _list(workshops: list[WorkshopDTO]) -> None:
    if not workshops:
        click.echo("No workshops found.")
        return
    click.echo(f"{'ID':<6} {'Date':<11} {'Time':<6} {'Status':<9} {'Host':<6} Title")
    click.echo("-" * 60)
    for w in workshops:
        host = w.artisan_id or "-"
        click.echo(f"{w.id:<6} {w.date:<11} {w.time:<6} {w.status:<9} {host:<6} {w.title}")


@click.command("book")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--title", required=True)
@click.option("--description", default="")
@click.option("--date", required=True, help="YYYY-MM-DD")
@click.option("--time", required=True, help="HH:MM")
def workshop_book(
    user_id: str, title: str, description: str, date: str, time: str
) -> None:
    """Book a workshop."""
    try:
        dto = BookWorkshopHandler(unit_of_work()).handle(
            user_id, title, description, date, time
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Workshop #{dto.id} booked for {dto.date} {dto.time}.")


@click.command("list")
@click.option(
    "--status", default=None, type=click.Choice([s.value for s in WorkshopStatus])
)
@click.option("--artisan", "artisan_id", default=None, help="Hosted by this artisan.")
@click.option("--user", "user_id", default=None, help="Booked by this user.")
def workshop_list(status: str | None, artisan_id: str | None, user_id: str | None) -> None:
    """List workshops."""
    _list(ListWorkshopsHandler(unit_of_work()).handle(status, artisan_id, user_id))


@click.command("accept")
@click.option("--id", "workshop_id", required=True, help="Workshop ID.")
@_artisan_option
def workshop_accept(workshop_id: str, artisan_id: str) -> None:
    """Host a pending workshop."""
    try:
        AcceptWorkshopHandler(unit_of_work()).handle(workshop_id, artisan_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Workshop accepted successfully!")


@click.command("remove")
@click.option("--id", "workshop_id", required=True, help="Workshop ID.")
@_artisan_option
def workshop_remove(workshop_id: str, artisan_id: str) -> None:
    """Remove a workshop you host."""
    try:
        message = RemoveWorkshopHandler(unit_of_work()).handle(workshop_id, artisan_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)
