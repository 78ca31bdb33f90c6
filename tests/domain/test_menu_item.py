"""Unit tests for menu items and topping decorations."""

import pytest

from diner.domain.model.menu_item import (
    CheeseTopping,
    MenuItem,
    Pasta,
    Pizza,
    ToppingDecorator,
    add_cheese,
)
from diner.domain.model.value_objects import Money


class TestDishes:

    def test_pizza(self):
        pizza = Pizza()
        assert pizza.name == "Pizza"
        assert pizza.price == Money.of("10.99")
        assert pizza.display_lines() == ["Pizza - $10.99"]
        assert not pizza.is_decorated

    def test_pasta(self):
        pasta = Pasta()
        assert pasta.name == "Pasta"
        assert pasta.price == Money.of("8.99")
        assert pasta.display_lines() == ["Pasta - $8.99"]

    def test_menu_item_is_abstract(self):
        with pytest.raises(TypeError):
            MenuItem()  # type: ignore[abstract]


class TestCheeseTopping:

    @pytest.mark.parametrize("item", [Pizza(), Pasta()])
    def test_adds_surcharge(self, item):
        assert add_cheese(item).price == item.price + Money.of("1.50")

    def test_pizza_with_cheese_price(self):
        assert add_cheese(Pizza()).price == Money.of("12.49")

    def test_display_appends_cheese_line(self):
        assert add_cheese(Pizza()).display_lines() == [
            "Pizza - $10.99",
            " + Cheese",
        ]

    def test_keeps_wrapped_name(self):
        topped = add_cheese(Pasta())
        assert topped.name == "Pasta"
        assert topped.is_decorated
        assert isinstance(topped, CheeseTopping)

    def test_stacks(self):
        double = add_cheese(add_cheese(Pizza()))
        assert double.price == Money.of("13.99")
        assert double.display_lines() == [
            "Pizza - $10.99",
            " + Cheese",
            " + Cheese",
        ]

    def test_wrapped_item_unchanged(self):
        pizza = Pizza()
        add_cheese(pizza)
        assert pizza.price == Money.of("10.99")
        assert pizza.display_lines() == ["Pizza - $10.99"]


class TestToppingDecorator:

    def test_plain_decorator_delegates(self):
        pasta = Pasta()
        wrapped = ToppingDecorator(pasta)
        assert wrapped.price == pasta.price
        assert wrapped.display_lines() == pasta.display_lines()
