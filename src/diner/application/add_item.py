"""Application service: Add Item use case."""

from __future__ import annotations

import logging

from diner.domain.factory.menu_item_factory import (
    MenuItemFactory,
    MenuItemKind,
    create_item,
)
from diner.domain.model.menu_item import MenuItem
from diner.domain.model.order import OrderBuilder

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(
        self,
        order_builder: OrderBuilder,
        factories: dict[MenuItemKind, MenuItemFactory],
    ) -> None:
        self._order_builder = order_builder
        self._factories = factories

    def handle(self, item_number: int) -> MenuItem:
        """Append a freshly created item to the order.

        Raises UnknownMenuItemError for numbers outside the menu; the
        order is left untouched in that case.
        """
        kind = MenuItemKind.from_number(item_number)
        item = create_item(self._factories, kind)
        self._order_builder.add_item(item)
        logger.debug(
            "Added %s to order (%d items, total %s)",
            item.name,
            len(self._order_builder),
            self._order_builder.calculate_total(),
        )
        return item
