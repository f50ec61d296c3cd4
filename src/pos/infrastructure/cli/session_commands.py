"""Interactive till: one cart and one order history for the session."""

from __future__ import annotations

import click

from pos.application.dto import CartDTO
from pos.application.edit_cart import (
    AddToCartHandler,
    ClearCartHandler,
    RemoveFromCartHandler,
    UpdateQuantityHandler,
)
from pos.application.generate_bill import GenerateBillHandler, ShowHistoryHandler
from pos.application.show_cart import ShowCartHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.catalog import ProductCatalog
from pos.infrastructure.bootstrap import Session, new_session

HELP_TEXT = """\
Commands:
  add NAME QTY              add QTY of product NAME (NAME may contain spaces)
  set INDEX QTY             change the quantity of cart line INDEX
  remove INDEX              remove cart line INDEX
  clear                     empty the cart
  cart [DISCOUNT]           show the cart, optionally with a discount preview
  bill PAYMENT [DISCOUNT]   finalize the sale and print the bill
  history                   show every bill from this session
  help                      show this text
  quit                      leave the session"""


def display_cart(dto: CartDTO) -> None:
    if dto.is_empty:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'#':>3} {'Item':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.index:>3} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<31} {dto.subtotal:>20}")
    click.echo(
        f"  {'Total After Discount (' + dto.discount_percentage + '%)':<31} "
        f"{dto.discounted_total:>20}"
    )


def _parse_int(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid {what} '{raw}'.")


def run_command(sess: Session, line: str) -> bool:
    """Execute one input line. Returns False when the session should end."""
    parts = line.split()
    if not parts:
        return True
    command, args = parts[0].lower(), parts[1:]

    if command in ("quit", "exit"):
        return False

    if command == "help":
        click.echo(HELP_TEXT)
    elif command == "add":
        if len(args) < 2:
            raise click.UsageError("usage: add NAME QTY")
        name = " ".join(args[:-1])
        qty = _parse_int(args[-1], "quantity")
        dto = AddToCartHandler(sess.cart).handle(name, qty)
        click.echo(f"Added {dto.quantity} x {dto.product_name} ({dto.line_total})")
    elif command == "set":
        if len(args) != 2:
            raise click.UsageError("usage: set INDEX QTY")
        index = _parse_int(args[0], "index")
        qty = _parse_int(args[1], "quantity")
        UpdateQuantityHandler(sess.cart).handle(index, qty)
        click.echo(f"Line {index} quantity set to {qty}")
    elif command == "remove":
        if len(args) != 1:
            raise click.UsageError("usage: remove INDEX")
        index = _parse_int(args[0], "index")
        RemoveFromCartHandler(sess.cart).handle(index)
        click.echo(f"Removed line {index}")
    elif command == "clear":
        ClearCartHandler(sess.cart).handle()
        click.echo("Cart cleared.")
    elif command == "cart":
        discount = args[0] if args else None
        display_cart(ShowCartHandler(sess.cart).handle(discount))
    elif command == "bill":
        if not args or len(args) > 2:
            raise click.UsageError("usage: bill PAYMENT [DISCOUNT]")
        discount = args[1] if len(args) == 2 else None
        handler = GenerateBillHandler(sess.cart, sess.history, sess.billing)
        click.echo(handler.handle(payment=args[0], discount=discount).text)
    elif command == "history":
        bills = ShowHistoryHandler(sess.history).handle()
        if not bills:
            click.echo("No orders have been placed yet.")
        else:
            click.echo("\n\n".join(bills))
    else:
        raise click.UsageError(f"Unknown command '{command}'. Type 'help'.")
    return True


@click.command("session")
@click.pass_obj
def session(catalog: ProductCatalog) -> None:
    """Run an interactive till until 'quit' or end of input."""
    sess = new_session(catalog)
    click.echo(f"{len(catalog)} products loaded. Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("pos", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break
        try:
            if not run_command(sess, line):
                break
        except (DomainException, click.UsageError) as exc:
            click.echo(f"Error: {exc}", err=True)
