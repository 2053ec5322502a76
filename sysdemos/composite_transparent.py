"""Composite with child management on every component, for transparency."""

import sys
from abc import ABC, abstractmethod


def _emit(out, text):
    print(text, file=out if out is not None else sys.stdout)


class Component(ABC):
    """Anything in a drawing; adding children to a primitive does nothing."""

    @abstractmethod
    def display(self):
        """Show this component."""

    def add(self, component):
        """Add a child; ignored by primitives."""
        return None

    def child(self, index):
        """Return a child; primitives have none."""
        return None


class Composite(Component):
    """A component made of other components."""

    def __init__(self):
        self.children = []

    def display(self):
        for component in self.children:
            component.display()

    def add(self, component):
        self.children.append(component)

    def child(self, index):
        if index < 0:
            raise IndexError(f"child index {index} out of range")
        return self.children[index]


class Line(Component):
    def __init__(self, line_id, out=None):
        self.line_id = line_id
        self.out = out

    def display(self):
        _emit(self.out, f"Line - {self.line_id}")


class Circle(Component):
    def __init__(self, circle_id, out=None):
        self.circle_id = circle_id
        self.out = out

    def display(self):
        _emit(self.out, f"Circle - {self.circle_id}")


def main(argv=None):
    """Build a drawing through the shared component interface."""
    composite_1 = Composite()
    composite_2 = Composite()
    line_1, line_2 = Line(1), Line(2)
    circle_1 = Circle(1)

    composite_1.add(line_1)
    composite_1.add(composite_2)
    print("=== Display composite - 1 ===")
    composite_1.display()

    line_2.add(circle_1)

    component = composite_1.child(1)
    if component is not None:
        component.add(line_2)
        component.add(circle_1)
    print("=== Display composite - 1's child ===")
    component.display()

    print()
    print("=== Display complete structure ===")
    composite_1.display()
    return 0


if __name__ == "__main__":
    sys.exit(main())