"""Application service: Show Menu use case (query)."""

from __future__ import annotations

import logging

from diner.application.dto import MenuEntryDTO
from diner.domain.factory.menu_item_factory import (
    MenuItemFactory,
    MenuItemKind,
    create_item,
)
from diner.domain.model.menu_item import MenuItem, add_cheese

logger = logging.getLogger(__name__)


class ShowMenuHandler:

    def __init__(self, factories: dict[MenuItemKind, MenuItemFactory]) -> None:
        self._factories = factories

    def handle(self, extra_cheese: bool) -> list[MenuEntryDTO]:
        """Build a fresh Pizza and Pasta, optionally topping the Pizza."""
        pizza = create_item(self._factories, MenuItemKind.PIZZA)
        pasta = create_item(self._factories, MenuItemKind.PASTA)

        if extra_cheese:
            pizza = add_cheese(pizza)
            logger.debug("Extra cheese added to %r", pizza)

        return [self._to_dto(pizza), self._to_dto(pasta)]

    @staticmethod
    def _to_dto(item: MenuItem) -> MenuEntryDTO:
        return MenuEntryDTO(
            name=item.name,
            lines=item.display_lines(),
            price=str(item.price),
            decorated=item.is_decorated,
        )
