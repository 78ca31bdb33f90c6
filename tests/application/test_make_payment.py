"""Integration tests for the MakePayment use case.

Uses recording fake strategies — nothing is printed.
"""

import logging

import pytest

from diner.application.make_payment import MakePaymentHandler
from diner.domain.exceptions import EmptyOrderError
from diner.domain.model.menu_item import Pasta, Pizza
from diner.domain.model.order import OrderBuilder
from diner.domain.model.value_objects import Money
from tests.fakes import FakePaymentStrategy


def _setup(*items):
    builder = OrderBuilder()
    for item in items:
        builder.add_item(item)
    cash = FakePaymentStrategy("cash")
    card = FakePaymentStrategy("credit card")
    handler = MakePaymentHandler(builder, {1: cash, 2: card}, default_code=1)
    return handler, cash, card


class TestMakePaymentSelection:

    def test_code_1_selects_cash(self):
        handler, cash, _ = _setup(Pizza())
        checkout = handler.prepare(1)
        assert checkout.strategy is cash
        assert checkout.method_name == "cash"
        assert not checkout.used_default

    def test_code_2_selects_credit_card(self):
        handler, _, card = _setup(Pizza())
        checkout = handler.prepare(2)
        assert checkout.strategy is card
        assert not checkout.used_default

    @pytest.mark.parametrize("code", [0, 3, -7, 100])
    def test_other_codes_fall_back_to_cash(self, code):
        handler, cash, _ = _setup(Pizza())
        checkout = handler.prepare(code)
        assert checkout.strategy is cash
        assert checkout.used_default

    def test_unregistered_default_code_rejected(self):
        with pytest.raises(ValueError, match="No payment strategy"):
            MakePaymentHandler(OrderBuilder(), {}, default_code=1)


class TestMakePaymentSettlement:

    def test_settles_order_total(self):
        handler, cash, card = _setup(Pizza(), Pasta())
        checkout = handler.prepare(2)
        assert checkout.total == Money.of("19.98")

        handler.settle(checkout)

        assert card.payments == [Money.of("19.98")]
        assert cash.payments == []

    def test_empty_order_rejected_before_any_payment(self):
        handler, cash, card = _setup()
        with pytest.raises(EmptyOrderError, match="add items to the order first"):
            handler.prepare(1)
        assert cash.payments == []
        assert card.payments == []

    def test_ensure_payable(self):
        handler, _, _ = _setup()
        with pytest.raises(EmptyOrderError):
            handler.ensure_payable()
        _setup(Pasta())[0].ensure_payable()

    def test_settlement_logs_method(self, caplog):
        handler, _, _ = _setup(Pasta())
        checkout = handler.prepare(2)
        with caplog.at_level(logging.DEBUG, logger="diner.application.make_payment"):
            handler.settle(checkout)
        assert "Settling $8.99 by credit card" in caplog.text
