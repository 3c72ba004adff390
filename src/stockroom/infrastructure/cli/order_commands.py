"""CLI commands for the CustomerOrder aggregate."""

from __future__ import annotations

import click

from stockroom.application.complete_order import CompleteOrderHandler
from stockroom.application.create_order import CreateOrderHandler
from stockroom.application.delete_order import DeleteOrderHandler
from stockroom.application.dto import OrderDTO, OrderItemSpec
from stockroom.application.edit_order import EditOrderHandler
from stockroom.application.revise_order_line import ReviseOrderLineHandler
from stockroom.application.show_order import ListOrdersHandler, ShowOrderHandler
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.order import OrderStatus
from stockroom.domain.model.value_objects import ProductState
from stockroom.infrastructure.bootstrap import order_repository, product_repository


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:raw:3,2:cooked:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for triple in raw.split(","):
        triple = triple.strip()
        parts = triple.split(":")
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{triple}'. Expected 'ProductId:State:Quantity'."
            )
        product_id, state_str, qty_str = (p.strip() for p in parts)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        try:
            state = ProductState.parse(state_str)
        except DomainException as exc:
            raise click.BadParameter(str(exc))
        specs.append(OrderItemSpec(product_id=product_id, state=state, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Group:    {dto.group}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<28} {'State':<7} {'Qty':>5} {'Price':>16} {'Total':>18}")
    click.echo(f"  {'-'*78}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<28} {item.state:<7} {item.quantity:>5} "
            f"{item.price:>16} {item.line_total:>18}"
        )
    click.echo(f"  {'-'*78}")
    click.echo(f"  {'Order Total':<42} {dto.total:>36}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--group", required=True, help="Customer group, e.g. 'Walk-in'.")
@click.option("--items", required=True, help="Items as 'ProductId:State:Qty,...'.")
def order_create(customer: str, group: str, items: str) -> None:
    """Create a new pending order (reserves stock)."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(customer_name=customer, group=group, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created — stock reserved.")
    _display_order(dto)


@click.command("edit")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to edit.")
@click.option("--customer", default=None, help="New customer name (default: unchanged).")
@click.option("--group", default=None, help="New group (default: unchanged).")
@click.option("--items", required=True, help="Full new item list as 'ProductId:State:Qty,...'.")
def order_edit(order_id: int, customer: str | None, group: str | None, items: str) -> None:
    """Replace a pending order's items (re-reserves stock)."""
    specs = _parse_items(items)

    try:
        current = ShowOrderHandler(order_repo=order_repository()).handle(order_id)
        handler = EditOrderHandler(
            order_repo=order_repository(),
            product_repo=product_repository(),
        )
        dto = handler.handle(
            order_id,
            customer_name=current.customer_name if customer is None else customer,
            group=current.group if group is None else group,
            item_specs=specs,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} updated — reservation adjusted.")
    _display_order(dto)


@click.command("revise")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to revise.")
@click.option("--line", "line_number", required=True, type=int, help="Line number (1 = first line).")
@click.option("--quantity", type=int, default=None, help="New quantity; 0 drops the line.")
@click.option(
    "--state",
    type=click.Choice([s.value for s in ProductState], case_sensitive=False),
    default=None,
    help="Switch the line to this variant.",
)
def order_revise(
    order_id: int, line_number: int, quantity: int | None, state: str | None
) -> None:
    """Change one line of a pending order (re-reserves stock)."""
    if quantity is None and state is None:
        raise click.UsageError("Nothing to change: pass --quantity and/or --state.")

    handler = ReviseOrderLineHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(
            order_id,
            line_number,
            quantity=quantity,
            state=ProductState.parse(state) if state else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} line {line_number} revised — reservation adjusted.")
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
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    default=None,
    help="Only show orders with this status.",
)
def order_list(status: str | None) -> None:
    """List orders, most recent first."""
    handler = ListOrdersHandler(order_repo=order_repository())
    orders = handler.handle(OrderStatus(status.upper()) if status else None)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<5} {'Customer':<22} {'Group':<18} {'Status':<10} {'Total':>16}")
    click.echo("-" * 75)
    for dto in orders:
        click.echo(
            f"{dto.id:<5} {dto.customer_name:<22} {dto.group:<18} {dto.status:<10} {dto.total:>16}"
        )


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to complete.")
def order_complete(order_id: int) -> None:
    """Mark a pending order as completed (no stock change)."""
    handler = CompleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} completed.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order (its stock is NOT returned)."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
