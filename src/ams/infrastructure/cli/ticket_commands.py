"""CLI commands for support tickets."""

from __future__ import annotations

import click

from ams.application.tickets import (
    ListTicketsHandler,
    RaiseTicketHandler,
    RemoveTicketHandler,
    UpdateTicketStatusHandler,
)
from ams.domain.exceptions import DomainException
from ams.domain.model.ticket import TicketStatus
from ams.infrastructure.bootstrap import unit_of_work


@click.command("raise")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--subject", required=True)
@click.option("--category", required=True)
@click.option("--description", required=True)
def ticket_raise(user_id: str, subject: str, category: str, description: str) -> None:
    """Open a support ticket."""
    try:
        dto = RaiseTicketHandler(unit_of_work()).handle(
            user_id, subject, category, description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Ticket #{dto.id} opened.")


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only this user's tickets.")
def ticket_list(user_id: str | None) -> None:
    """List support tickets."""
    tickets = ListTicketsHandler(unit_of_work()).handle(user_id)
    if not tickets:
        click.echo("No tickets found.")
        return
    click.echo(f"{'ID':<6} {'User':<8} {'Status':<12} {'Category':<12} Subject")
    click.echo("-" * 60)
    for t in tickets:
        click.echo(f"{t.id:<6} {t.user_id:<8} {t.status:<12} {t.category:<12} {t.subject}")


@click.command("status")
@click.option("--id", "ticket_id", required=True, help="Ticket ID.")
@click.option(
    "--to", "status", required=True, type=click.Choice([s.value for s in TicketStatus])
)
def ticket_status(ticket_id: str, status: str) -> None:
    """Move a ticket to a new status."""
    try:
        dto = UpdateTicketStatusHandler(unit_of_work()).handle(ticket_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Ticket #{dto.id} is now {dto.status}.")


@click.command("remove")
@click.option("--id", "ticket_id", required=True, help="Ticket ID.")
def ticket_remove(ticket_id: str) -> None:
    """Remove a ticket."""
    try:
        message = RemoveTicketHandler(unit_of_work()).handle(ticket_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)
