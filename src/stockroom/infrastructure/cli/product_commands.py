"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from stockroom.application.add_product import AddProductHandler
from stockroom.application.adjust_stock import AdjustStockHandler
from stockroom.application.advisory_text import GenerateDescriptionHandler
from stockroom.application.delete_product import DeleteProductHandler
from stockroom.application.show_catalog import ShowCatalogHandler
from stockroom.application.update_product import UpdateProductHandler
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.draft import ProductDraft
from stockroom.infrastructure.bootstrap import advisory_service, product_repository
from stockroom.infrastructure.config import settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", required=True, help="Unique SKU (case-sensitive).")
@click.option("--category", required=True, help="Category.")
@click.option("--quantity", default=0, type=int, show_default=True, help="Initial stock.")
@click.option("--price-raw", required=True, help="Price of the raw variant.")
@click.option("--price-cooked", required=True, help="Price of the cooked variant.")
@click.option("--description", default="", help="Free-text description.")
def product_add(
    name: str,
    sku: str,
    category: str,
    quantity: int,
    price_raw: str,
    price_cooked: str,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())
    draft = ProductDraft(name, sku, category, quantity, price_raw, price_cooked, description)

    try:
        product = handler.handle(draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added ({product.quantity} in stock)")


@click.command("list")
@click.option("--category", default=None, help="Only show this category.")
def product_list(category: str | None) -> None:
    """List all products in the catalog."""
    handler = ShowCatalogHandler(product_repo=product_repository())
    products = handler.handle(threshold=settings.LOW_STOCK_THRESHOLD, category=category)

    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<5} {'Name':<28} {'SKU':<10} {'Category':<12} {'Qty':>5} "
        f"{'Raw':>16} {'Cooked':>16}  Status"
    )
    click.echo("-" * 110)
    for p in products:
        click.echo(
            f"{p.id:<5} {p.name:<28} {p.sku:<10} {p.category:<12} {p.quantity:>5} "
            f"{p.price_raw:>16} {p.price_cooked:>16}  {p.stock_status}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--sku", default=None)
@click.option("--category", default=None)
@click.option("--quantity", default=None, type=int)
@click.option("--price-raw", default=None)
@click.option("--price-cooked", default=None)
@click.option("--description", default=None)
def product_update(product_id: str, **fields: object) -> None:
    """Replace a product; omitted options keep their current value."""
    current = product_repository().get_by_id(product_id)
    if current is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    values = {
        "name": current.name,
        "sku": current.sku,
        "category": current.category,
        "quantity": current.quantity,
        "price_raw": str(current.price_raw.amount),
        "price_cooked": str(current.price_cooked.amount),
        "description": current.description,
    }
    values.update({k: v for k, v in fields.items() if v is not None})

    handler = UpdateProductHandler(product_repo=product_repository())
    try:
        handler.handle(product_id, ProductDraft(**values))  # type: ignore[arg-type]
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog (existing orders keep their lines)."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")


@click.command("adjust")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Units to add (or remove, if negative).")
def product_adjust(product_id: str, delta: int) -> None:
    """Manually count stock in or out."""
    handler = AdjustStockHandler(product_repo=product_repository())

    try:
        quantity = handler.handle(product_id, delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} now has {quantity} in stock")


@click.command("describe")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Category.")
@click.option("--keywords", default="", help="Comma-separated keywords.")
def product_describe(name: str, category: str, keywords: str) -> None:
    """Suggest a product description (advisory, needs an OpenAI key)."""
    handler = GenerateDescriptionHandler(advisory=advisory_service())

    try:
        text = handler.handle(name, category, keywords)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(text)
