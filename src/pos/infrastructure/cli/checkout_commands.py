"""CLI command for a one-shot sale."""

from __future__ import annotations

import click

from pos.application.edit_cart import AddToCartHandler
from pos.application.generate_bill import GenerateBillHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.catalog import ProductCatalog
from pos.infrastructure.bootstrap import new_session


def parse_items(raw: str) -> list[tuple[str, int]]:
    """Parse 'Latte:2,Green Tea:1' into (name, quantity) pairs, in order."""
    specs: list[tuple[str, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append((name.strip(), qty))
    return specs


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option("--payment", required=True, help="Amount tendered (e.g. 20.00).")
@click.option(
    "--discount",
    default=None,
    help="Discount percentage 0-100. Unparseable values mean no discount.",
)
@click.pass_obj
def checkout(
    catalog: ProductCatalog, items: str, payment: str, discount: str | None
) -> None:
    """Ring up ITEMS in one go and print the bill."""
    specs = parse_items(items)
    sess = new_session(catalog)

    add = AddToCartHandler(sess.cart)
    bill = GenerateBillHandler(sess.cart, sess.history, sess.billing)

    try:
        for name, qty in specs:
            add.handle(name, qty)
        dto = bill.handle(payment=payment, discount=discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.text)
