"""Order accumulation and order notifications.

``OrderBuilder`` collects the items a customer picks during a session
and prices them.  ``Order`` is the notification channel the kitchen
subscribes to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from diner.domain.model.menu_item import MenuItem
from diner.domain.model.value_objects import Money


class OrderBuilder:
    """Append-only list of selected menu items.

    Invariant: ``calculate_total()`` is always the exact sum of the
    prices of the items added so far.
    """

    def __init__(self) -> None:
        self._items: list[MenuItem] = []

    def add_item(self, item: MenuItem) -> None:
        self._items.append(item)

    def calculate_total(self) -> Money:
        total = Money.zero()
        for item in self._items:
            total = total + item.price
        return total

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class OrderObserver(ABC):

    @abstractmethod
    def update(self, order: Order) -> None:
        """React to a notification about *order*."""


class Order:
    """Notification channel for order events."""

    def __init__(self) -> None:
        self._observers: list[OrderObserver] = []

    def attach(self, observer: OrderObserver) -> None:
        self._observers.append(observer)

    def notify(self) -> None:
        """Call ``update`` on every observer, in attachment order."""
        for observer in self._observers:
            observer.update(self)

    @property
    def observers(self) -> tuple[OrderObserver, ...]:
        return tuple(self._observers)
