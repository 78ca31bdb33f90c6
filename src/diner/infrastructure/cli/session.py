"""Interactive ordering session.

Drives the numbered console menu: every turn prints the options, reads
one line and dispatches to the matching use case.  Bad input never ends
the session; it prints a message and goes back to the main menu.
"""

from __future__ import annotations

import re
from typing import Callable

import click

from diner.application.add_item import AddItemHandler
from diner.application.make_payment import MakePaymentHandler
from diner.application.show_menu import ShowMenuHandler
from diner.domain.exceptions import DomainException
from diner.domain.factory.menu_item_factory import MenuItemFactory, MenuItemKind
from diner.domain.model.order import Order, OrderBuilder
from diner.domain.payment.payment_strategy import PaymentStrategy

# Returns the next input line, or None once input is exhausted.
LineReader = Callable[[], "str | None"]

DISPLAY_MENU = 1
ADD_ITEM = 2
MAKE_PAYMENT = 3
EXIT = 4

# ASCII digits only, with an optional sign.
_NUMBER = re.compile(r"[+-]?[0-9]+")


class InvalidNumberError(Exception):
    """A prompt expecting a number got something else."""


class EndOfInput(Exception):
    """Standard input was closed."""


def _stdin_line() -> str | None:
    line = click.get_text_stream("stdin").readline()
    return line or None


class OrderingSession:
    """State and control flow for one run of the ordering console.

    The order builder and the order notification channel live here for
    the lifetime of the session; nothing is kept at module level.
    """

    def __init__(
        self,
        order_builder: OrderBuilder,
        order: Order,
        factories: dict[MenuItemKind, MenuItemFactory],
        strategies: dict[int, PaymentStrategy],
        default_payment_code: int,
        read_line: LineReader | None = None,
    ) -> None:
        self._order_builder = order_builder
        self._order = order
        self._read_line = read_line or _stdin_line

        self._show_menu = ShowMenuHandler(factories)
        self._add_item = AddItemHandler(order_builder, factories)
        self._make_payment = MakePaymentHandler(
            order_builder, strategies, default_payment_code
        )
        self._actions: dict[int, Callable[[], None]] = {
            DISPLAY_MENU: self.display_menu,
            ADD_ITEM: self.add_item,
            MAKE_PAYMENT: self.make_payment,
        }

    @property
    def order_builder(self) -> OrderBuilder:
        return self._order_builder

    @property
    def order(self) -> Order:
        return self._order

    # --- Main loop ------------------------------------------------------------

    def run(self) -> None:
        click.echo("Welcome to the Restaurant!")
        try:
            while self.step():
                pass
        except EndOfInput:
            return

    def step(self) -> bool:
        """Run one turn of the menu. Returns False once the user exits."""
        self._print_options()
        try:
            choice = self._read_number()
            if choice == EXIT:
                click.echo("Exiting program. Goodbye!")
                return False

            action = self._actions.get(choice)
            if action is None:
                click.echo("Invalid choice. Please enter a valid option.")
            else:
                action()
        except InvalidNumberError:
            click.echo("Invalid input. Please enter a number.")
        except DomainException as exc:
            click.echo(str(exc))
        return True

    # --- Actions --------------------------------------------------------------

    def display_menu(self) -> None:
        click.echo("Menu Items:")
        click.echo("Do you want to add extra cheese to the pizza? (Y/N):")
        extra_cheese = self._read_text().upper() == "Y"

        for entry in self._show_menu.handle(extra_cheese=extra_cheese):
            for line in entry.lines:
                click.echo(line)
            if entry.decorated:
                click.echo(f"  Total: {entry.price}")

    def add_item(self) -> None:
        click.echo("Enter item number to add (1 for Pizza, 2 for Pasta):")
        item = self._add_item.handle(self._read_number())
        click.echo(f"{item.name} added to order.")

    def make_payment(self) -> None:
        self._make_payment.ensure_payable()

        click.echo("Select payment method:")
        click.echo("1. Cash Payment")
        click.echo("2. Credit Card Payment")
        checkout = self._make_payment.prepare(self._read_number())

        if checkout.used_default:
            click.echo("Invalid choice. Using default payment method (Cash).")
        click.echo(f"Total Amount: {checkout.total}")
        self._make_payment.settle(checkout)

    # --- Input helpers --------------------------------------------------------

    @staticmethod
    def _print_options() -> None:
        click.echo("\nChoose an option:")
        click.echo("1. Display Menu")
        click.echo("2. Add Item to Order")
        click.echo("3. Make Payment")
        click.echo("4. Exit")

    def _read_text(self) -> str:
        line = self._read_line()
        if line is None:
            raise EndOfInput
        return line.rstrip("\r\n")

    def _read_number(self) -> int:
        text = self._read_text()
        if not _NUMBER.fullmatch(text.strip()):
            raise InvalidNumberError(text)
        return int(text.strip())
