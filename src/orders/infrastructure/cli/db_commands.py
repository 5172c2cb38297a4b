"""CLI commands for schema creation and seeding."""

from __future__ import annotations

import click

from orders.infrastructure import bootstrap, seed


@click.command("init")
def db_init() -> None:
    """Create the schema and seed sample data into an empty store."""
    report = seed.initialize(bootstrap.engine(), bootstrap.session_factory())

    if report.skipped:
        click.echo("Database already contains data — nothing seeded.")
        return

    click.echo(
        f"Seeded {report.users} users, {report.orders} orders, "
        f"{report.products} products."
    )
