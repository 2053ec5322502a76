"""Factory method: each pizza store decides which concrete pizza it makes."""

import sys
from abc import ABC, abstractmethod


class Pizza:
    """A pizza that reports every step of its preparation."""

    def __init__(self, name, out=None):
        self.name = name
        self.out = out

    def _say(self, text):
        print(text, file=self.out if self.out is not None else sys.stdout)

    def prepare(self):
        self._say("preparing pizza")

    def bake(self):
        self._say("baking pizza")

    def cut(self):
        self._say("cutting pizza")

    def box(self):
        self._say("boxing pizza")


class _RegionalPizza(Pizza):
    def prepare(self):
        self._say("preparing ")
        self._say(self.name)

    def box(self):
        self._say("boxing with new york based advertisement")


class NyStyleCheesePizza(_RegionalPizza):
    def __init__(self, out=None):
        super().__init__("New York Style Cheese Pizza", out)


class NyStyleNonvegPizza(_RegionalPizza):
    def __init__(self, out=None):
        super().__init__("New York Style Nonveg Pizza", out)


class ChicagoStyleCheesePizza(_RegionalPizza):
    def __init__(self, out=None):
        super().__init__("Chicago Style Cheese Pizza", out)


class ChicagoStyleNonvegPizza(_RegionalPizza):
    def __init__(self, out=None):
        super().__init__("Chicago Style Nonveg Pizza", out)


class PizzaStore(ABC):
    """A store that orders pizzas made by its own factory method."""

    def __init__(self, out=None):
        self.out = out

    @abstractmethod
    def create_pizza(self, kind):
        """Return a new pizza of ``kind``, or None if it is not on the menu."""

    def order_pizza(self, kind):
        """Make, bake, cut and box a pizza of ``kind`` and return it."""
        pizza = self.create_pizza(kind)
        if pizza is None:
            raise ValueError(f"no pizza of kind {kind!r}")
        pizza.prepare()
        pizza.bake()
        pizza.cut()
        pizza.box()
        return pizza


class NyPizzaStore(PizzaStore):
    _MENU = {"cheese": NyStyleCheesePizza, "nonveg": NyStyleNonvegPizza}

    def create_pizza(self, kind):
        pizza_class = self._MENU.get(kind)
        return None if pizza_class is None else pizza_class(self.out)


class ChicagoPizzaStore(PizzaStore):
    _MENU = {"cheese": ChicagoStyleCheesePizza, "nonveg": ChicagoStyleNonvegPizza}

    def create_pizza(self, kind):
        pizza_class = self._MENU.get(kind)
        return None if pizza_class is None else pizza_class(self.out)


def main(argv=None):
    """Order one pizza of each kind from each store."""
    orders = [
        (NyPizzaStore, "nonveg"),
        (NyPizzaStore, "cheese"),
        (ChicagoPizzaStore, "cheese"),
        (ChicagoPizzaStore, "nonveg"),
    ]
    for position, (store_class, kind) in enumerate(orders):
        if position:
            print()
        pizza = store_class().order_pizza(kind)
        print(pizza.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())