"""Payment strategies that settle by printing a confirmation line."""

from __future__ import annotations

import logging

import click

from diner.domain.model.value_objects import Money
from diner.domain.payment.payment_strategy import PaymentStrategy

logger = logging.getLogger(__name__)


class _ConsolePayment(PaymentStrategy):

    def pay(self, amount: Money) -> None:
        click.echo(f"Paid {amount} by {self.method_name}.")
        logger.info("Settled %s by %s", amount, self.method_name)


class CashPayment(_ConsolePayment):

    @property
    def method_name(self) -> str:
        return "cash"


class CreditCardPayment(_ConsolePayment):

    @property
    def method_name(self) -> str:
        return "credit card"
