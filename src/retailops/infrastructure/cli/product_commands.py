"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from retailops.infrastructure.cli.api_client import ApiError, get_client


def _display_product(p: dict) -> None:
    click.echo(f"Product {p['id']}")
    click.echo(f"Name:      {p['name']}")
    click.echo(f"Category:  {p['category'] or '-'}")
    click.echo(f"Price:     ${p['price']:.2f}")
    click.echo(f"Stock:     {p['stock']}")
    if p["description"]:
        click.echo(f"About:     {p['description']}")


@click.command("list")
@click.option("--category", default=None, help="Exact category to match.")
@click.option("--min-price", type=float, default=None, help="Lowest price, inclusive.")
@click.option("--max-price", type=float, default=None, help="Highest price, inclusive.")
@click.pass_context
def product_list(
    ctx: click.Context,
    category: str | None,
    min_price: float | None,
    max_price: float | None,
) -> None:
    """List products in the catalog."""
    try:
        products = get_client(ctx).list_products(
            category=category, minPrice=min_price, maxPrice=max_price
        )
    except ApiError as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Category':<14} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 92)
    for p in products:
        click.echo(
            f"{p['id']:<38} {p['name']:<20} {p['category']:<14} "
            f"{'$' + format(p['price'], '.2f'):>10} {p['stock']:>6}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_context
def product_show(ctx: click.Context, product_id: str) -> None:
    """Show a single product."""
    try:
        product = get_client(ctx).get_product(product_id)
    except ApiError as exc:
        raise click.ClickException(str(exc))
    _display_product(product)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=float, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--description", default=None)
@click.option("--category", default=None)
@click.pass_context
def product_add(
    ctx: click.Context,
    name: str,
    price: float,
    stock: int,
    description: str | None,
    category: str | None,
) -> None:
    """Add a new product to the catalog."""
    fields = {
        "name": name,
        "price": price,
        "stock": stock,
        "description": description,
        "category": category,
    }
    try:
        product = get_client(ctx).create_product(fields)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product['id']} '{product['name']}' added at ${product['price']:.2f}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--price", type=float, default=None)
@click.option("--stock", type=int, default=None, help="New absolute stock level.")
@click.option("--description", default=None)
@click.option("--category", default=None)
@click.pass_context
def product_update(ctx: click.Context, product_id: str, **fields) -> None:
    """Update some fields of a product; omitted options are left alone."""
    supplied = {k: v for k, v in fields.items() if v is not None}
    if not supplied:
        raise click.UsageError("Nothing to update.")

    try:
        product = get_client(ctx).update_product(product_id, supplied)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} updated.")
    _display_product(product)


@click.command("restock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Units to add (negative to remove).")
@click.pass_context
def product_restock(ctx: click.Context, product_id: str, delta: int) -> None:
    """Adjust a product's stock by a signed amount."""
    try:
        product = get_client(ctx).adjust_stock(product_id, delta)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{product['name']}' is now {product['stock']}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_context
def product_delete(ctx: click.Context, product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        get_client(ctx).delete_product(product_id)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
