"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
import os
import sys

from diner.domain.factory.menu_item_factory import default_factories
from diner.domain.model.order import Order, OrderBuilder
from diner.domain.payment.payment_strategy import PaymentStrategy
from diner.infrastructure.cli.session import LineReader, OrderingSession
from diner.infrastructure.kitchen.chef import Chef
from diner.infrastructure.payment.console_payments import (
    CashPayment,
    CreditCardPayment,
)

LOG_LEVEL_ENV = "DINER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Menu codes for the payment prompt; unknown codes fall back to cash.
CASH_CODE = 1
CREDIT_CARD_CODE = 2


def configure_logging() -> None:
    """Send log records to stderr so they never mix with the menu output."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def payment_strategies() -> dict[int, PaymentStrategy]:
    return {
        CASH_CODE: CashPayment(),
        CREDIT_CARD_CODE: CreditCardPayment(),
    }


def order_channel() -> Order:
    order = Order()
    order.attach(Chef())
    return order


def ordering_session(read_line: LineReader | None = None) -> OrderingSession:
    return OrderingSession(
        order_builder=OrderBuilder(),
        order=order_channel(),
        factories=default_factories(),
        strategies=payment_strategies(),
        default_payment_code=CASH_CODE,
        read_line=read_line,
    )
