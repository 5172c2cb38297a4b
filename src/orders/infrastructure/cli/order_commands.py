"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orders.application.add_products import AddProductsHandler
from orders.application.change_order_status import ChangeOrderStatusHandler
from orders.application.create_order import CreateOrderHandler
from orders.application.dto import OrderDTO, ProductSpec
from orders.application.show_order import ShowOrderHandler
from orders.domain.exceptions import DomainException
from orders.domain.model.value_objects import OrderStatus
from orders.infrastructure.bootstrap import unit_of_work

_STATUS_CHOICES = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _parse_items(raw: str) -> list[ProductSpec]:
    """Parse 'Widget:15.00,Gadget:25' into ProductSpec list."""
    specs: list[ProductSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Price'."
            )
        name, price = pair.rsplit(":", 1)
        specs.append(ProductSpec(name=name.strip(), price=price.strip()))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"User:  {dto.user_id}")
    click.echo()
    click.echo(f"  {'Product':<30} {'Price':>12}")
    click.echo(f"  {'-'*43}")
    for p in dto.products:
        click.echo(f"  {p.name:<30} {p.price:>12}")
    click.echo(f"  {'-'*43}")
    click.echo(f"  {'Order Total':<30} {dto.total:>12}")


@click.command("create")
@click.option("--user-id", required=True, help="ID of the ordering user.")
@click.option("--status", type=_STATUS_CHOICES, default=OrderStatus.PENDING.value,
              show_default=True, help="Initial status.")
@click.option("--items", default=None, help="Products as 'Name:Price,Name:Price'.")
def order_create(user_id: str, status: str, items: str | None) -> None:
    """Create a new order."""
    specs = _parse_items(items) if items else None

    try:
        with unit_of_work() as uow:
            handler = CreateOrderHandler(order_repo=uow.orders, user_repo=uow.users)
            dto = handler.handle(user_id=user_id, status=status, product_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created")
    _display_order(dto)


@click.command("add-products")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--items", required=True, help="Products as 'Name:Price,Name:Price'.")
def order_add_products(order_id: str, items: str) -> None:
    """Append products to an order."""
    specs = _parse_items(items)

    try:
        with unit_of_work() as uow:
            dto = AddProductsHandler(order_repo=uow.orders).handle(order_id, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    try:
        with unit_of_work() as uow:
            dto = ShowOrderHandler(order_repo=uow.orders).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


def _change_status(order_id: str, target: OrderStatus) -> OrderDTO:
    try:
        with unit_of_work() as uow:
            return ChangeOrderStatusHandler(order_repo=uow.orders).handle(order_id, target)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("pay")
@click.option("--id", "order_id", required=True, help="Order ID to mark paid.")
def order_pay(order_id: str) -> None:
    """Mark a pending order as paid."""
    dto = _change_status(order_id, OrderStatus.PAID)
    click.echo(f"Order {dto.id} paid.")


@click.command("complete")
@click.option("--id", "order_id", required=True, help="Order ID to complete.")
def order_complete(order_id: str) -> None:
    """Complete a paid order."""
    dto = _change_status(order_id, OrderStatus.COMPLETED)
    click.echo(f"Order {dto.id} completed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
def order_cancel(order_id: str) -> None:
    """Cancel a pending or paid order."""
    dto = _change_status(order_id, OrderStatus.CANCELLED)
    click.echo(f"Order {dto.id} cancelled.")
