import logging
import shlex

import click

from stockroom.infrastructure.cli.order_commands import (
    order_complete,
    order_create,
    order_delete,
    order_edit,
    order_list,
    order_revise,
    order_show,
)
from stockroom.infrastructure.cli.product_commands import (
    product_add,
    product_adjust,
    product_delete,
    product_describe,
    product_list,
    product_update,
)
from stockroom.infrastructure.cli.report_commands import (
    report_dashboard,
    report_groups,
    report_restock,
)
from stockroom.infrastructure.config import settings


@click.group()
def cli() -> None:
    """stockroom — catalog stock and customer order reservations"""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def report() -> None:
    """Reports and suggestions."""


@cli.command("shell")
def shell() -> None:
    """Run commands interactively against one in-memory session."""
    click.echo("stockroom shell — type 'exit' to quit, '--help' for commands.")
    while True:
        try:
            line = click.prompt("stockroom", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            break
        if line.strip() in {"exit", "quit"}:
            break
        try:
            args = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            continue
        if not args or args[0] == "shell":
            continue
        try:
            cli.main(args=args, prog_name="stockroom", standalone_mode=False)
        except click.ClickException as exc:
            exc.show()
        except click.Abort:
            break


# Register subcommands
order.add_command(order_create)
order.add_command(order_edit)
order.add_command(order_revise)
order.add_command(order_complete)
order.add_command(order_delete)
order.add_command(order_show)
order.add_command(order_list)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_delete)
product.add_command(product_adjust)
product.add_command(product_describe)
report.add_command(report_dashboard)
report.add_command(report_groups)
report.add_command(report_restock)
