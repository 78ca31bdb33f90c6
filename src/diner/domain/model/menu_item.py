"""Menu items and their topping decorations.

Every entry on the menu, plain or decorated, answers the same two
questions: what it costs and how it is displayed.  Decorations wrap
another item and add to both answers, so they can be stacked.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from diner.domain.model.value_objects import Money

PIZZA_PRICE = Money.of("10.99")
PASTA_PRICE = Money.of("8.99")
CHEESE_SURCHARGE = Money.of("1.50")


class MenuItem(ABC):
    """A priceable, displayable catalog entry."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Label shown on the menu."""

    @property
    @abstractmethod
    def price(self) -> Money:
        """Price including any decorations."""

    @abstractmethod
    def display_lines(self) -> list[str]:
        """Lines printed when the item is shown on the menu."""

    @property
    def is_decorated(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} {self.price}>"


class _BaseDish(MenuItem):
    """A dish with a fixed label and price."""

    _name: str
    _price: Money

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Money:
        return self._price

    def display_lines(self) -> list[str]:
        return [f"{self._name} - {self._price}"]


class Pizza(_BaseDish):
    _name = "Pizza"
    _price = PIZZA_PRICE


class Pasta(_BaseDish):
    _name = "Pasta"
    _price = PASTA_PRICE


class ToppingDecorator(MenuItem):
    """Wraps a menu item and delegates everything to it.

    Subclasses override what the topping changes.
    """

    def __init__(self, menu_item: MenuItem) -> None:
        self._menu_item = menu_item

    @property
    def name(self) -> str:
        return self._menu_item.name

    @property
    def price(self) -> Money:
        return self._menu_item.price

    def display_lines(self) -> list[str]:
        return self._menu_item.display_lines()

    @property
    def is_decorated(self) -> bool:
        return True


class CheeseTopping(ToppingDecorator):

    @property
    def price(self) -> Money:
        return self._menu_item.price + CHEESE_SURCHARGE

    def display_lines(self) -> list[str]:
        return super().display_lines() + [" + Cheese"]


def add_cheese(item: MenuItem) -> MenuItem:
    """Return *item* with extra cheese on top."""
    return CheeseTopping(item)
