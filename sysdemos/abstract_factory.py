"""Abstract factory: stores build pizzas from regional ingredient factories."""

import sys
from abc import ABC, abstractmethod


class Cheese:
    def __init__(self, name):
        self.name = name


class NyStyleCheese(Cheese):
    def __init__(self):
        super().__init__("New York Cheese")


class ChicagoStyleCheese(Cheese):
    def __init__(self):
        super().__init__("Chicago Style Cheese")


class Sauce:
    def __init__(self, name):
        self.name = name


class NyStyleSauce(Sauce):
    def __init__(self):
        super().__init__("New York Style Sauce")


class ChicagoStyleSauce(Sauce):
    def __init__(self):
        super().__init__("Chicago Style Sauce")


class PizzaIngredientFactory(ABC):
    """Makes the matching family of ingredients for one region."""

    @abstractmethod
    def create_cheese(self):
        """Return a new cheese."""

    @abstractmethod
    def create_sauce(self):
        """Return a new sauce."""


class NyPizzaIngredientFactory(PizzaIngredientFactory):
    def create_cheese(self):
        return NyStyleCheese()

    def create_sauce(self):
        return NyStyleSauce()


class ChicagoPizzaIngredientFactory(PizzaIngredientFactory):
    def create_cheese(self):
        return ChicagoStyleCheese()

    def create_sauce(self):
        return ChicagoStyleSauce()


class Pizza(ABC):
    """A pizza whose ingredients are chosen when it is prepared."""

    def __init__(self, name, out=None):
        self.name = name
        self.out = out
        self.cheese = None
        self.sauce = None

    def _say(self, text):
        print(text, file=self.out if self.out is not None else sys.stdout)

    @abstractmethod
    def prepare(self):
        """Gather the ingredients."""

    def bake(self):
        self._say("baking pizza")

    def cut(self):
        self._say("cutting pizza")

    def box(self):
        self._say("boxing pizza")


class _FactoryPizza(Pizza):
    def __init__(self, name, ingredient_factory, out=None):
        super().__init__(name, out)
        self.ingredient_factory = ingredient_factory

    def prepare(self):
        self._say("preparing ")
        self.cheese = self.ingredient_factory.create_cheese()
        self.sauce = self.ingredient_factory.create_sauce()
        self._say("mixing ")
        self._say(self.cheese.name)
        self._say(self.sauce.name)
        self._say(self.name)

    def box(self):
        self._say("boxing")


class CheesePizza(_FactoryPizza):
    def __init__(self, ingredient_factory, out=None):
        super().__init__("Cheese Pizza", ingredient_factory, out)


class NonvegPizza(_FactoryPizza):
    def __init__(self, ingredient_factory, out=None):
        super().__init__("Non veg Pizza", ingredient_factory, out)


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


class _RegionalStore(PizzaStore):
    _region = ""
    _factory_class = PizzaIngredientFactory
    _MENU = {"cheese": (CheesePizza, "Cheese"), "nonveg": (NonvegPizza, "Nonveg")}

    def __init__(self, out=None):
        super().__init__(out)
        self.ingredient_factory = self._factory_class()

    def create_pizza(self, kind):
        entry = self._MENU.get(kind)
        if entry is None:
            return None
        pizza_class, label = entry
        pizza = pizza_class(self.ingredient_factory, self.out)
        pizza.name = f"{self._region} Style {label} Pizza"
        return pizza


class NyPizzaStore(_RegionalStore):
    _region = "New York"
    _factory_class = NyPizzaIngredientFactory


class ChicagoPizzaStore(_RegionalStore):
    _region = "Chicago"
    _factory_class = ChicagoPizzaIngredientFactory


def main(argv=None):
    """Order pizzas from both stores and print their names."""
    print(NyPizzaStore().order_pizza("nonveg").name)
    print()
    print(NyPizzaStore().order_pizza("cheese").name)
    print()
    chicago = ChicagoPizzaStore()
    print(chicago.order_pizza("cheese").name)
    print()
    print(chicago.order_pizza("cheese").name)
    return 0


if __name__ == "__main__":
    sys.exit(main())