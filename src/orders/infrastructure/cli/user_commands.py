"""CLI commands for users."""

from __future__ import annotations

import click

from orders.application.create_user import CreateUserHandler
from orders.application.list_users import ListUsersHandler
from orders.domain.exceptions import DomainException
from orders.infrastructure.bootstrap import unit_of_work


@click.command("create")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address.")
def user_create(name: str, email: str) -> None:
    """Register a new user."""
    try:
        with unit_of_work() as uow:
            dto = CreateUserHandler(user_repo=uow.users).handle(name=name, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {dto.id} '{dto.name}' <{dto.email}> created")


@click.command("list")
def user_list() -> None:
    """List all users."""
    try:
        with unit_of_work() as uow:
            users = ListUsersHandler(user_repo=uow.users).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Orders':>6}  Email")
    click.echo("-" * 90)
    for u in users:
        click.echo(f"{u.id:<36}  {u.name:<20} {u.order_count:>6}  {u.email}")
