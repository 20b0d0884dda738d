import click

from myshop.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_ship,
    order_show,
)
from myshop.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_deactivate,
    product_list,
    product_show,
    product_stock,
)
from myshop.infrastructure.logging import configure_logging
from myshop.infrastructure.settings import get_settings


@click.group()
def cli() -> None:
    """MyShop: catalog and order management."""
    configure_logging(get_settings())


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    from myshop.infrastructure.api.app import create_app

    uvicorn.run(create_app(), host=host, port=port)


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_ship)
order.add_command(order_show)
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_stock)
