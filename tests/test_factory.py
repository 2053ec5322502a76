import io

import pytest

from sysdemos.factory import (
    ChicagoPizzaStore,
    ChicagoStyleNonvegPizza,
    NyPizzaStore,
    NyStyleCheesePizza,
    Pizza,
    PizzaStore,
    main,
)


def test_ny_store_makes_ny_cheese_pizza():
    pizza = NyPizzaStore(io.StringIO()).create_pizza("cheese")
    assert isinstance(pizza, NyStyleCheesePizza)
    assert pizza.name == "New York Style Cheese Pizza"


def test_chicago_store_makes_chicago_nonveg_pizza():
    pizza = ChicagoPizzaStore(io.StringIO()).create_pizza("nonveg")
    assert isinstance(pizza, ChicagoStyleNonvegPizza)
    assert pizza.name == "Chicago Style Nonveg Pizza"


def test_unknown_kind_creates_nothing():
    assert NyPizzaStore().create_pizza("hawaiian") is None


def test_ordering_unknown_kind_raises():
    with pytest.raises(ValueError):
        ChicagoPizzaStore(io.StringIO()).order_pizza("hawaiian")


def test_order_runs_every_step_in_order():
    out = io.StringIO()
    pizza = NyPizzaStore(out).order_pizza("nonveg")
    assert out.getvalue().splitlines() == [
        "preparing ",
        pizza.name,
        "baking pizza",
        "cutting pizza",
        "boxing with new york based advertisement",
    ]


def test_plain_pizza_steps():
    out = io.StringIO()
    pizza = Pizza("plain", out)
    pizza.prepare()
    pizza.box()
    assert out.getvalue().splitlines() == ["preparing pizza", "boxing pizza"]


def test_each_order_gives_a_new_pizza():
    store = NyPizzaStore(io.StringIO())
    first = store.order_pizza("cheese")
    second = store.order_pizza("cheese")
    assert len({id(first), id(second)}) == 2
    assert [first.name, second.name] == ["New York Style Cheese Pizza"] * 2


def test_store_base_is_abstract():
    with pytest.raises(TypeError):
        PizzaStore()


def test_main_prints_each_pizza_name(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    names = [line for line in lines if line.endswith("Pizza") and " Style " in line]
    assert names[1::2] == [
        "New York Style Nonveg Pizza",
        "New York Style Cheese Pizza",
        "Chicago Style Cheese Pizza",
        "Chicago Style Nonveg Pizza",
    ]
    assert lines.count("") == 3