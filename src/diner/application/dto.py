"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from diner.domain.model.value_objects import Money
from diner.domain.payment.payment_strategy import PaymentStrategy


@dataclass(frozen=True)
class MenuEntryDTO:
    """Output: one menu item as displayed to the user."""

    name: str
    lines: list[str]
    price: str  # formatted, e.g. "$12.49"
    decorated: bool


@dataclass(frozen=True)
class CheckoutDTO:
    """A payment that is ready to be settled."""

    strategy: PaymentStrategy
    total: Money
    used_default: bool

    @property
    def method_name(self) -> str:
        return self.strategy.method_name
