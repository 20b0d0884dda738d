"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from myshop.application.cancel_order import CancelOrderHandler
from myshop.application.create_order import CreateOrderHandler
from myshop.application.dto import OrderDTO, OrderItemSpec
from myshop.application.list_orders import ListOrdersHandler
from myshop.application.ship_order import ShipOrderHandler
from myshop.application.show_order import ShowOrderHandler
from myshop.domain.exceptions import DomainException
from myshop.domain.model.value_objects import Address
from myshop.infrastructure.bootstrap import (
    currency,
    email_sender,
    order_repository,
    payment_gateway,
    pricing_policy,
    product_repository,
)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product ID : quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            specs.append(OrderItemSpec(product_id=int(id_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
    return specs


def _money(dto: OrderDTO, amount) -> str:
    return f"{dto.currency} {amount:.2f}"


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_email}")
    click.echo(f"Created:  {dto.created_at:%Y-%m-%d %H:%M} UTC")
    if dto.payment_reference:
        click.echo(f"Payment:  {dto.payment_reference}")
    click.echo()

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} "
            f"{_money(dto, item.unit_price):>12} {_money(dto, item.subtotal):>12}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<27} {_money(dto, dto.subtotal):>24}")
    click.echo(f"  {'Shipping':<27} {_money(dto, dto.shipping_cost):>24}")
    click.echo(f"  {'Discount':<27} {'-' + _money(dto, dto.discount):>24}")
    click.echo(f"  {'Order Total':<27} {_money(dto, dto.total):>24}")


@click.command("create")
@click.option("--email", required=True, help="Customer e-mail.")
@click.option("--street", required=True)
@click.option("--city", required=True)
@click.option("--state", required=True)
@click.option("--zip", "zip_code", required=True)
@click.option("--country", default="Brasil", show_default=True)
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
def order_create(
    email: str,
    street: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
    items: str,
) -> None:
    """Place a new order (reserves stock and authorizes payment)."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        payment_gateway=payment_gateway(),
        email_sender=email_sender(),
        pricing_policy=pricing_policy(),
        currency=currency(),
    )

    try:
        address = Address(street, city, state, zip_code, country)
        dto = handler.handle(email, address, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
def order_list() -> None:
    """List all orders."""
    orders = ListOrdersHandler(order_repo=order_repository()).handle()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<28} {'Status':<10} {'Total':>14}")
    click.echo("-" * 61)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.customer_email:<28} {dto.status:<10} "
            f"{_money(dto, dto.total):>14}"
        )


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order (restores stock and refunds payment)."""
    handler = CancelOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        payment_gateway=payment_gateway(),
        email_sender=email_sender(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")


@click.command("ship")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to ship.")
def order_ship(order_id: int) -> None:
    """Mark a confirmed order as shipped."""
    handler = ShipOrderHandler(
        order_repo=order_repository(),
        email_sender=email_sender(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} shipped.")
