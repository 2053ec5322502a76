"""Composite with child management only on composites, for safety."""

import sys
from abc import ABC, abstractmethod


class Component(ABC):
    """Anything that can be displayed as part of a tree."""

    @abstractmethod
    def display(self):
        """Show this component."""

    def get_composite(self):
        """Return the component as a composite, or None for a leaf."""
        return None


class Composite(Component):
    """A component made of other components."""

    def __init__(self):
        self.children = []

    def display(self):
        for component in self.children:
            component.display()

    def get_composite(self):
        return self

    def add(self, component):
        self.children.append(component)

    def child(self, index):
        if index < 0:
            raise IndexError(f"child index {index} out of range")
        return self.children[index]


class Leaf(Component):
    """A component with no children."""

    def __init__(self, leaf_id, out=None):
        self.leaf_id = leaf_id
        self.out = out

    def display(self):
        print(
            f"Leaf - {self.leaf_id} execution",
            file=self.out if self.out is not None else sys.stdout,
        )


def main(argv=None):
    """Build a small tree, adding children only where a composite allows."""
    composite_1 = Composite()
    composite_2 = Composite()
    leaf_1, leaf_2, leaf_3 = Leaf(1), Leaf(2), Leaf(3)

    component = composite_1
    target = component.get_composite()
    if target is not None:
        target.add(leaf_1)
        target.add(composite_2)
    print("=== Display composite - 1 ===")
    component.display()

    target = leaf_2.get_composite()
    if target is not None:
        target.add(leaf_3)

    component = composite_1.child(1)
    target = component.get_composite()
    if target is not None:
        target.add(leaf_2)
        target.add(leaf_3)
    print("=== Display composite - 1's child ===")
    component.display()

    print()
    print("=== Display complete structure ===")
    composite_1.display()

    print()
    print("=== Using isinstance to check whether object is a Composite or not ===")
    for label, obj in (("composite_1", composite_1), ("leaf_3", leaf_3)):
        verdict = "is a Composite" if isinstance(obj, Composite) else "is not a Composite"
        print(f"{label} {verdict}")
    return 0


if __name__ == "__main__":
    sys.exit(main())