"""Kitchen-side observer of new orders."""

from __future__ import annotations

import click

from diner.domain.model.order import Order, OrderObserver


class Chef(OrderObserver):

    def update(self, order: Order) -> None:
        click.echo("Chef: New order received.")
