"""Session commands for products."""

from __future__ import annotations

import click

from wms.application.add_product import AddProductHandler
from wms.application.dto import ProductDTO
from wms.application.show_products import ShowProductsHandler
from wms.application.update_product import UpdateProductPriceHandler
from wms.domain.exceptions import DomainException
from wms.infrastructure.bootstrap import LedgerSession


def _echo_table(products: list[ProductDTO], indent: str = "") -> None:
    click.echo(f"{indent}{'ID':<36}  {'Name':<20} {'Category':<12} {'Price':>10}")
    click.echo(indent + "-" * 82)
    for p in products:
        click.echo(f"{indent}{p.id:<36}  {p.name:<20} {p.category:<12} {p.price:>10}")


@click.command("add")
@click.option("--id", "product_id", default=None, help="Product UUID (random if omitted).")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Category name (case-insensitive).")
@click.option("--price", default=None, help="Price (e.g. 15.00); zero if omitted.")
@click.pass_obj
def product_add(
    session: LedgerSession,
    product_id: str | None,
    name: str,
    category: str,
    price: str | None,
) -> None:
    """Add a new product to the warehouse."""
    handler = AddProductHandler(session.warehouse, session.categories)
    try:
        product = handler.handle(
            name=name, category=category, price=price, product_id=product_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {product.id} '{product.name}' added to {product.category} "
        f"at {product.price}"
    )


@click.command("update-price")
@click.option("--id", "product_id", required=True, help="Product UUID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update_price(session: LedgerSession, product_id: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductPriceHandler(session.warehouse)
    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} price is now {product.price}")


@click.command("list")
@click.pass_obj
def product_list(session: LedgerSession) -> None:
    """List all products in the warehouse."""
    products = ShowProductsHandler(session.warehouse, session.categories).list_all()

    if not products:
        click.echo("No products found.")
        return
    _echo_table(products)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product UUID.")
@click.pass_obj
def product_show(session: LedgerSession, product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductsHandler(session.warehouse, session.categories)
    try:
        product = handler.by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        click.echo(f"Product {product_id} not found.")
        return
    _echo_table([product])


@click.command("by-category")
@click.argument("category")
@click.pass_obj
def product_by_category(session: LedgerSession, category: str) -> None:
    """List products in one category."""
    handler = ShowProductsHandler(session.warehouse, session.categories)
    try:
        products = handler.by_category(category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo(f"No products in category '{category}'.")
        return
    _echo_table(products)


@click.command("grouped")
@click.pass_obj
def product_grouped(session: LedgerSession) -> None:
    """List products grouped by category."""
    groups = ShowProductsHandler(session.warehouse, session.categories).grouped()

    if not groups:
        click.echo("No products found.")
        return
    for group in groups:
        click.echo(f"{group.category} ({len(group.products)})")
        _echo_table(group.products, indent="  ")
