import io

import pytest

from sysdemos.composite_transparent import Circle, Component, Composite, Line, main


def test_primitive_ignores_add():
    out = io.StringIO()
    line = Line(2, out)
    line.add(Circle(1, out))
    line.display()
    assert out.getvalue().splitlines() == ["Line - 2"]


def test_primitive_has_no_children():
    assert Line(1).child(0) is None
    assert Circle(1).child(0) is None


def test_composite_displays_children_in_order():
    out = io.StringIO()
    root = Composite()
    inner = Composite()
    root.add(Line(1, out))
    root.add(inner)
    inner.add(Line(2, out))
    inner.add(Circle(1, out))
    root.display()
    assert out.getvalue().splitlines() == ["Line - 1", "Line - 2", "Circle - 1"]


def test_composite_child_lookup():
    root = Composite()
    inner = Composite()
    root.add(Line(1))
    root.add(inner)
    assert root.child(1) is inner
    with pytest.raises(IndexError):
        root.child(2)
    with pytest.raises(IndexError):
        root.child(-1)


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component()


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "=== Display composite - 1 ===",
        "Line - 1",
        "=== Display composite - 1's child ===",
        "Line - 2",
        "Circle - 1",
        "",
        "=== Display complete structure ===",
        "Line - 1",
        "Line - 2",
        "Circle - 1",
    ]