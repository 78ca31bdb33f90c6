"""Abstract payment strategy.

Concrete strategies live in the infrastructure layer because settling
a payment is a side effect (here, printing a confirmation).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from diner.domain.model.value_objects import Money


class PaymentStrategy(ABC):

    @property
    @abstractmethod
    def method_name(self) -> str:
        """Human-readable payment method, e.g. 'cash'."""

    @abstractmethod
    def pay(self, amount: Money) -> None:
        """Settle *amount* using this payment method."""
