import click
import uvicorn

from retailops.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_show,
    order_stats,
    order_status,
)
from retailops.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_restock,
    product_show,
    product_update,
)
from retailops.infrastructure.config import get_settings
from retailops.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--api-url", envvar="API_URL", default=None, help="Base URL of a running server.")
@click.pass_context
def cli(ctx: click.Context, api_url: str | None) -> None:
    """RetailOps back office: products, stock and orders."""
    ctx.ensure_object(dict)
    # The HTTP client is opened on first use by a product or order command
    ctx.obj.setdefault("api_url", api_url)


@cli.command()
@click.option("--host", default=None, help="Bind address (default from settings).")
@click.option("--port", type=int, default=None, help="Port (default from settings).")
@click.option("--reload", is_flag=True, default=False, help="Restart on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    setup_logging(settings)
    uvicorn.run(
        "retailops.infrastructure.http.app:create_application",
        factory=True,
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
        log_config=None,
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_stats)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_restock)
product.add_command(product_show)
product.add_command(product_update)
