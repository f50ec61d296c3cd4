import click

from pos.domain.exceptions import CatalogLoadError
from pos.infrastructure.bootstrap import product_catalog
from pos.infrastructure.cli.catalog_commands import catalog_categories, catalog_list
from pos.infrastructure.cli.checkout_commands import checkout
from pos.infrastructure.cli.session_commands import session
from pos.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--catalog",
    "catalog_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Product catalog JSON (default: $POS_CATALOG_PATH or the bundled file).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, catalog_file: str | None, verbose: bool) -> None:
    """POS — Cafe point of sale"""
    configure_logging("DEBUG" if verbose else None)
    try:
        ctx.obj = product_catalog(catalog_file)
    except CatalogLoadError as exc:
        raise click.ClickException(str(exc))


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
catalog.add_command(catalog_categories)
catalog.add_command(catalog_list)
cli.add_command(checkout)
cli.add_command(session)
