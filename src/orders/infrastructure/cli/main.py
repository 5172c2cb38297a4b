import click

from orders.infrastructure import bootstrap
from orders.infrastructure.cli.db_commands import db_init
from orders.infrastructure.cli.order_commands import (
    order_add_products,
    order_cancel,
    order_complete,
    order_create,
    order_pay,
    order_show,
)
from orders.infrastructure.cli.user_commands import user_create, user_list
from orders.infrastructure.logging import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """Orders — users, orders and products"""
    configure_logging("DEBUG" if verbose else bootstrap.settings().log_level)


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
db.add_command(db_init)
user.add_command(user_create)
user.add_command(user_list)
order.add_command(order_add_products)
order.add_command(order_cancel)
order.add_command(order_complete)
order.add_command(order_create)
order.add_command(order_pay)
order.add_command(order_show)
