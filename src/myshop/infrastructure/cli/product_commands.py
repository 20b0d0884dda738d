"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from myshop.application.add_product import AddProductHandler
from myshop.application.change_product_status import ChangeProductStatusHandler
from myshop.application.list_products import ListProductsHandler
from myshop.application.show_product import ShowProductHandler
from myshop.application.update_stock import UpdateStockHandler
from myshop.domain.exceptions import DomainException
from myshop.infrastructure.bootstrap import currency, product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Initial stock quantity.")
@click.option("--description", default=None, help="Free-text description.")
def product_add(name: str, price: str, stock: int, description: str | None) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            name=name,
            price=price,
            stock_quantity=stock,
            description=description,
            currency=currency(),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{dto.id} '{dto.name}' added at {dto.currency} {dto.price:.2f} "
        f"({dto.stock_quantity} in stock)"
    )


@click.command("list")
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive products.")
def product_list(include_inactive: bool) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())
    products = handler.handle(include_inactive=include_inactive)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>12} {'Stock':>7} {'Active':>7}")
    click.echo("-" * 56)
    for p in products:
        price = f"{p.currency} {p.price:.2f}"
        active = "yes" if p.is_active else "no"
        click.echo(f"{p.id:<6} {p.name:<20} {price:>12} {p.stock_quantity:>7} {active:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}  {p.name}  ({'active' if p.is_active else 'inactive'})")
    if p.description:
        click.echo(p.description)
    click.echo(f"Price: {p.currency} {p.price:.2f}")
    click.echo(f"Stock: {p.stock_quantity}")


@click.command("stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
def product_stock(product_id: int, quantity: int) -> None:
    """Set a product's stock level."""
    handler = UpdateStockHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id, new_quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} stock set to {quantity}")


def _change_status(product_id: int, active: bool) -> None:
    handler = ChangeProductStatusHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id, active=active)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} {'activated' if active else 'deactivated'}.")


@click.command("activate")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_activate(product_id: int) -> None:
    """Make a product available for ordering."""
    _change_status(product_id, active=True)


@click.command("deactivate")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_deactivate(product_id: int) -> None:
    """Withdraw a product from ordering (stock is kept)."""
    _change_status(product_id, active=False)
