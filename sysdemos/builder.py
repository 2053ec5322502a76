"""Builder: a cook directs builders that assemble pizzas step by step."""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Pizza:
    dough: str = ""
    sauce: str = ""
    topping: str = ""

    def describe(self):
        """Return a sentence naming the pizza's parts."""
        return (
            f"Pizza with {self.dough} dough, {self.sauce} sauce "
            f"and {self.topping} topping."
        )


class PizzaBuilder(ABC):
    """Assembles one pizza at a time."""

    def __init__(self):
        self._pizza = None

    def _current(self):
        if self._pizza is None:
            raise RuntimeError("no pizza is being built")
        return self._pizza

    def new_pizza(self):
        """Start a fresh pizza."""
        self._pizza = Pizza()

    def take_pizza(self):
        """Hand over the pizza built so far; the builder is left empty."""
        pizza = self._current()
        self._pizza = None
        return pizza

    @abstractmethod
    def build_dough(self):
        """Set the dough."""

    @abstractmethod
    def build_sauce(self):
        """Set the sauce."""

    @abstractmethod
    def build_topping(self):
        """Set the topping."""


class HawaiianPizzaBuilder(PizzaBuilder):
    def build_dough(self):
        self._current().dough = "cross"

    def build_sauce(self):
        self._current().sauce = "mild"

    def build_topping(self):
        self._current().topping = "ham+pineapple"


class SpicyPizzaBuilder(PizzaBuilder):
    def build_dough(self):
        self._current().dough = "pan baked"

    def build_sauce(self):
        self._current().sauce = "hot"

    def build_topping(self):
        self._current().topping = "pepperoni+salami"


class Cook:
    """Directs a builder through the steps of making a pizza."""

    def __init__(self, out=None):
        self.out = out
        self._builder = None

    def make_pizza(self, builder):
        self._builder = builder
        builder.new_pizza()
        builder.build_dough()
        builder.build_sauce()
        builder.build_topping()

    def open_pizza(self):
        """Take the finished pizza, report it and return it."""
        if self._builder is None:
            raise RuntimeError("no pizza has been made")
        pizza = self._builder.take_pizza()
        print(pizza.describe(), file=self.out if self.out is not None else sys.stderr)
        return pizza


def main(argv=None):
    """Make and open a Hawaiian and a spicy pizza."""
    cook = Cook()
    cook.make_pizza(HawaiianPizzaBuilder())
    cook.open_pizza()
    cook.make_pizza(SpicyPizzaBuilder())
    cook.open_pizza()
    return 0


if __name__ == "__main__":
    sys.exit(main())