"""Factories that produce fresh menu items by kind."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from diner.domain.exceptions import UnknownMenuItemError
from diner.domain.model.menu_item import MenuItem, Pasta, Pizza


class MenuItemKind(Enum):
    PIZZA = 1
    PASTA = 2

    @staticmethod
    def from_number(number: int) -> MenuItemKind:
        """Map a menu number (1 for Pizza, 2 for Pasta) to a kind."""
        try:
            return MenuItemKind(number)
        except ValueError as exc:
            raise UnknownMenuItemError("Invalid item number.") from exc


class MenuItemFactory(ABC):

    @abstractmethod
    def create_menu_item(self) -> MenuItem:
        """Return a new, undecorated menu item."""


class PizzaFactory(MenuItemFactory):

    def create_menu_item(self) -> MenuItem:
        return Pizza()


class PastaFactory(MenuItemFactory):

    def create_menu_item(self) -> MenuItem:
        return Pasta()


def default_factories() -> dict[MenuItemKind, MenuItemFactory]:
    return {
        MenuItemKind.PIZZA: PizzaFactory(),
        MenuItemKind.PASTA: PastaFactory(),
    }


def create_item(
    factories: dict[MenuItemKind, MenuItemFactory], kind: MenuItemKind
) -> MenuItem:
    """Create a fresh menu item of *kind* with the matching factory."""
    return factories[kind].create_menu_item()
