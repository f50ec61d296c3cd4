"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from pos.application.browse_catalog import ListCategoriesHandler, ListProductsHandler
from pos.application.dto import ProductDTO
from pos.domain.model.catalog import ProductCatalog


def display_products(products: list[ProductDTO]) -> None:
    """Shared formatting for product listings."""
    click.echo(f"{'Name':<20} {'Category':<14} {'Price':>10}")
    click.echo("-" * 46)
    for p in products:
        click.echo(f"{p.name:<20} {p.category:<14} {p.price:>10}")


@click.command("categories")
@click.pass_obj
def catalog_categories(catalog: ProductCatalog) -> None:
    """List product categories."""
    for category in ListCategoriesHandler(catalog).handle():
        click.echo(category)


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.pass_obj
def catalog_list(catalog: ProductCatalog, category: str | None) -> None:
    """List products, sorted by name within each category."""
    products = ListProductsHandler(catalog).handle(category)

    if not products:
        if category is None:
            click.echo("No products found.")
        else:
            click.echo(f"No products found in category '{category}'.")
        return

    display_products(products)
