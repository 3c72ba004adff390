"""CLI commands for reports and advisory suggestions."""

from __future__ import annotations

import click

from stockroom.application.advisory_text import SuggestRestockHandler
from stockroom.application.show_dashboard import GroupReportHandler, ShowDashboardHandler
from stockroom.infrastructure.bootstrap import (
    advisory_service,
    order_repository,
    product_repository,
)
from stockroom.infrastructure.config import settings


@click.command("dashboard")
def report_dashboard() -> None:
    """Show headline stock and order figures."""
    handler = ShowDashboardHandler(
        product_repo=product_repository(),
        order_repo=order_repository(),
    )
    dto = handler.handle(threshold=settings.LOW_STOCK_THRESHOLD)

    click.echo(f"Products:          {dto.product_count}")
    click.echo(f"Units on hand:     {dto.units_on_hand}")
    click.echo(f"Stock value:       {dto.stock_value}")
    click.echo(f"Low stock:         {dto.low_stock_count}")
    click.echo(f"Out of stock:      {dto.out_of_stock_count}")
    click.echo(f"Pending orders:    {dto.pending_orders}")
    click.echo(f"Completed orders:  {dto.completed_orders}")


@click.command("groups")
def report_groups() -> None:
    """Completed-order revenue by customer group."""
    groups = GroupReportHandler(order_repo=order_repository()).handle()

    if not groups:
        click.echo("No completed orders yet.")
        return

    for group in groups:
        click.echo(f"{group.group:<40} {group.total:>20}")
        for customer in group.customers:
            click.echo(f"    {customer.customer_name:<36} {customer.total:>20}")


@click.command("restock")
def report_restock() -> None:
    """Suggest which low-stock products to reorder first (advisory)."""
    handler = SuggestRestockHandler(
        product_repo=product_repository(),
        advisory=advisory_service(),
    )
    click.echo(handler.handle(threshold=settings.LOW_STOCK_THRESHOLD))
