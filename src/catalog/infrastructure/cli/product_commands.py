"""CLI commands for the Product entity."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from catalog.application.dto import PageDTO, ProductDTO
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.infrastructure.bootstrap import product_manager
from catalog.infrastructure.config import get_settings


def _parse_price(ctx: click.Context, param: click.Parameter, value: str) -> Decimal:
    """Turn the --price text into a Decimal."""
    try:
        price = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{value}'.")
    if not price.is_finite():
        raise click.BadParameter(f"Invalid price '{value}'.")
    return price


def _display_products(products: list[ProductDTO]) -> None:
    click.echo(f"{'ID':<6} {'Name':<20} {'Qty':>6} {'Price':>10} {'Supplier':>9}")
    click.echo("-" * 55)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.quantity:>6} {p.unit_price:>10} {p.supplier_id:>9}"
        )


@click.command("list")
@click.option("--page", "page_number", default=1, type=int, help="Page number, starting at 1.")
@click.option("--size", "page_size", default=None, type=int, help="Products per page.")
def product_list(page_number: int, page_size: int | None) -> None:
    """List products in the catalog, one page at a time."""
    if page_size is None:
        page_size = get_settings().default_page_size

    try:
        page = product_manager().list_products(page_number - 1, page_size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    dto = PageDTO.from_page(page)
    _display_products(dto.items)
    click.echo(f"Page {dto.page_number} of {dto.total_pages} ({dto.total_elements} products)")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to display.")
def product_show(product_id: int) -> None:
    """Show details of a single product."""
    try:
        product = product_manager().get_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    dto = ProductDTO.from_product(product)
    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"Quantity: {dto.quantity}")
    click.echo(f"Price:    {dto.unit_price}")
    click.echo(f"Supplier: {dto.supplier_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--price", required=True, callback=_parse_price, help="Unit price (e.g. 15.00).")
@click.option("--supplier", "supplier_id", default=None, type=int, help="Supplier ID.")
def product_add(name: str, quantity: int, price: Decimal, supplier_id: int | None) -> None:
    """Add a new product to the catalog."""
    candidate = Product(
        name=name, quantity=quantity, unit_price=price, supplier_id=supplier_id
    )

    try:
        message = product_manager().create_product(candidate)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{message} (ID {candidate.id})")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--price", required=True, callback=_parse_price, help="Unit price (e.g. 29.99).")
@click.option("--supplier", "supplier_id", default=None, type=int, help="Supplier ID.")
def product_update(
    product_id: int, name: str, quantity: int, price: Decimal, supplier_id: int | None
) -> None:
    """Replace the name, stock, price and supplier of a product."""
    candidate = Product(
        id=product_id, name=name, quantity=quantity, unit_price=price, supplier_id=supplier_id
    )

    try:
        message = product_manager().update_product(candidate)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to delete.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        message = product_manager().delete_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("set-stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
def product_set_stock(product_id: int, quantity: int) -> None:
    """Set the stock level of a product."""
    try:
        message = product_manager().update_quantity(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)
