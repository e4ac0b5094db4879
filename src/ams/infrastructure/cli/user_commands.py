"""CLI commands for the User aggregate."""

from __future__ import annotations

import click

from ams.application.register_user import RegisterUserHandler
from ams.application.retire_user import RetireUserHandler
from ams.domain.exceptions import DomainException
from ams.domain.model.user import Role
from ams.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--username", required=True)
@click.option("--name", required=True)
@click.option("--email", required=True)
@click.option("--role", required=True, type=click.Choice([r.value for r in Role]))
def user_add(username: str, name: str, email: str, role: str) -> None:
    """Register a user."""
    try:
        user = RegisterUserHandler(unit_of_work()).handle(username, name, email, role)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} '{user.username}' registered as {user.role}")


@click.command("retire")
@click.option("--id", "user_id", required=True, help="User ID.")
def user_retire(user_id: str) -> None:
    """Retire a user and everything that hangs off their account."""
    try:
        RetireUserHandler(unit_of_work()).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user_id} retired.")
