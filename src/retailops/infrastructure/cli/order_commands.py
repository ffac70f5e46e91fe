"""CLI commands for orders."""

from __future__ import annotations

import click

from retailops.infrastructure.cli.api_client import ApiError, get_client

STATUSES = ["pending", "processing", "completed", "cancelled"]


def _parse_items(raw: str) -> list[dict]:
    """Parse 'productId:3,productId:5' into request items."""
    items: list[dict] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        items.append({"productId": product_id.strip(), "quantity": qty})
    return items


def _display_order(order: dict) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {order['orderNumber']}  (status={order['status']})")
    click.echo(f"ID:       {order['id']}")
    click.echo(f"Customer: {order['customerName']} <{order['customerEmail']}>")
    click.echo(f"Created:  {order['createdAt']}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in order["items"]:
        line_total = item["price"] * item["quantity"]
        click.echo(
            f"  {item['productName']:<20} {item['quantity']:>5} "
            f"{'$' + format(item['price'], '.2f'):>10} {'$' + format(line_total, '.2f'):>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {'$' + format(order['totalAmount'], '.2f'):>20}")


@click.command("list")
@click.option("--status", type=click.Choice(STATUSES), default=None)
@click.option("--email", default=None, help="Part of the customer email.")
@click.pass_context
def order_list(ctx: click.Context, status: str | None, email: str | None) -> None:
    """List orders."""
    try:
        orders = get_client(ctx).list_orders(status=status, customerEmail=email)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<30} {'Customer':<28} {'Status':<11} {'Total':>12}")
    click.echo("-" * 84)
    for o in orders:
        click.echo(
            f"{o['orderNumber']:<30} {o['customerEmail']:<28} {o['status']:<11} "
            f"{'$' + format(o['totalAmount'], '.2f'):>12}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_context
def order_show(ctx: click.Context, order_id: str) -> None:
    """Show details of an existing order."""
    try:
        order = get_client(ctx).get_order(order_id)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    _display_order(order)


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_context
def order_create(ctx: click.Context, customer: str, email: str, items: str) -> None:
    """Place a new order (deducts stock)."""
    body = {
        "customerName": customer,
        "customerEmail": email,
        "items": _parse_items(items),
    }
    try:
        order = get_client(ctx).create_order(body)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order['orderNumber']} created  (status={order['status']})")
    _display_order(order)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--status", required=True, type=click.Choice(STATUSES))
@click.pass_context
def order_status(ctx: click.Context, order_id: str, status: str) -> None:
    """Set an order's status (no stock changes)."""
    try:
        order = get_client(ctx).update_order_status(order_id, status)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order['orderNumber']} is now {order['status']}.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
@click.pass_context
def order_cancel(ctx: click.Context, order_id: str) -> None:
    """Cancel an order and restore its stock."""
    try:
        order = get_client(ctx).cancel_order(order_id)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order['orderNumber']} cancelled, stock restored.")


@click.command("stats")
@click.pass_context
def order_stats(ctx: click.Context) -> None:
    """Show order counts and revenue."""
    try:
        stats = get_client(ctx).order_stats()
    except ApiError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Orders:  {stats['totalOrders']}")
    click.echo(f"Revenue: ${stats['totalRevenue']:.2f}")
    for status, count in stats["ordersByStatus"].items():
        click.echo(f"  {status:<12} {count:>5}")
