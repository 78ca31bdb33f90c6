"""Application service: Make Payment use case.

Checkout happens in two steps so the CLI can report the total before
the chosen strategy settles it:

1. ``prepare()`` checks the order has items, resolves the payment
   method code and snapshots the total.
2. ``settle()`` hands the total to the strategy.
"""

from __future__ import annotations

import logging

from diner.application.dto import CheckoutDTO
from diner.domain.exceptions import EmptyOrderError
from diner.domain.model.order import OrderBuilder
from diner.domain.payment.payment_strategy import PaymentStrategy

logger = logging.getLogger(__name__)


class MakePaymentHandler:

    def __init__(
        self,
        order_builder: OrderBuilder,
        strategies: dict[int, PaymentStrategy],
        default_code: int,
    ) -> None:
        if default_code not in strategies:
            raise ValueError(f"No payment strategy registered for code {default_code}")
        self._order_builder = order_builder
        self._strategies = strategies
        self._default_code = default_code

    def ensure_payable(self) -> None:
        if self._order_builder.is_empty:
            raise EmptyOrderError("Please add items to the order first.")

    def prepare(self, method_code: int) -> CheckoutDTO:
        self.ensure_payable()

        strategy = self._strategies.get(method_code)
        used_default = strategy is None
        if used_default:
            logger.debug(
                "Unknown payment method %d, falling back to code %d",
                method_code,
                self._default_code,
            )
            strategy = self._strategies[self._default_code]

        return CheckoutDTO(
            strategy=strategy,
            total=self._order_builder.calculate_total(),
            used_default=used_default,
        )

    def settle(self, checkout: CheckoutDTO) -> None:
        logger.debug("Settling %s by %s", checkout.total, checkout.method_name)
        checkout.strategy.pay(checkout.total)
