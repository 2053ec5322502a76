"""Iterator: external, reverse and internal iteration over bounded lists."""

import sys
from abc import ABC, abstractmethod

MAX_SIZE = 100


def _check_size(size):
    if not 0 <= size <= MAX_SIZE:
        raise ValueError(f"list size must lie in 0..{MAX_SIZE}")


class _BoundedList(ABC):
    def __init__(self, items):
        self._items = list(items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value):
        self._items[index] = value

    def __iter__(self):
        return iter(self._items)

    @abstractmethod
    def create_iterator(self):
        """Return this list's own kind of iterator."""


class MyList(_BoundedList):
    """A list of ``size`` copies of ``value``."""

    def __init__(self, size, value):
        _check_size(size)
        super().__init__([value] * size)

    def create_iterator(self):
        return ListIterator(self)


class SkipList(_BoundedList):
    """A list counting up from ``value``, walked from the back."""

    def __init__(self, size, value):
        _check_size(size)
        super().__init__(value + offset for offset in range(size))

    def create_iterator(self):
        return SkipListIterator(self)


def _out_of_range(index):
    return IndexError(f"Index {index} is out of range")


class ListIterator:
    """Walks a list from the front."""

    def __init__(self, items):
        self._items = items
        self._index = 0

    @property
    def index(self):
        return self._index

    def begin(self):
        self._index = 0

    def next(self):
        self._index += 1

    def done(self):
        return self._index >= len(self._items)

    def current_item(self):
        if self.done():
            raise _out_of_range(self._index)
        return self._items[self._index]

    def __iter__(self):
        self.begin()
        while not self.done():
            yield self.current_item()
            self.next()


class ReverseListIterator:
    """Walks a list from the back."""

    def __init__(self, items):
        self._items = items
        self._index = 0

    @property
    def index(self):
        return self._index - 1

    def begin(self):
        self._index = len(self._items)

    def next(self):
        self._index -= 1

    def done(self):
        return self._index <= 0

    def current_item(self):
        if self.done():
            raise _out_of_range(self._index)
        return self._items[self._index - 1]

    def __iter__(self):
        self.begin()
        while not self.done():
            yield self.current_item()
            self.next()


class SkipListIterator(ReverseListIterator):
    """The iterator a skip list hands out: back to front."""


class InternalIterator(ABC):
    """Applies ``process_item`` to each item until it returns False."""

    def __init__(self, items):
        self._items = items
        self._iterator = ListIterator(items)

    @abstractmethod
    def process_item(self, value):
        """Handle one item; return False to stop the traversal."""

    def _replace(self, value):
        self._items[self._iterator.index] = value

    def traverse(self):
        """Visit the items in order; return the last ``process_item`` result.

        An empty list gives False.
        """
        result = False
        iterator = self._iterator
        iterator.begin()
        while not iterator.done():
            result = self.process_item(iterator.current_item())
            if not result:
                break
            iterator.next()
        return result


class MultiplyBy(InternalIterator):
    """Multiplies every item in place."""

    def __init__(self, items, multiplier):
        super().__init__(items)
        self.multiplier = multiplier

    def process_item(self, value):
        self._replace(value * self.multiplier)
        return True


class DisplayList(InternalIterator):
    """Writes every item followed by a space."""

    def __init__(self, items, out=None):
        super().__init__(items)
        self.out = out

    def process_item(self, value):
        print(f"{value} ", end="", file=self.out if self.out is not None else sys.stdout)
        return True


def print_list(iterator, out=None):
    """Write the iterator's items on one line and return them."""
    values = list(iterator)
    print(
        "".join(f"{value} " for value in values),
        file=out if out is not None else sys.stdout,
    )
    return values


def main(argv=None):
    """Walk lists forwards, backwards and with internal iterators."""
    print("=== Using Forward and Reverse Iterators ===")
    plain = MyList(5, 4)
    print_list(ListIterator(plain))
    print_list(ReverseListIterator(plain))

    print("=== Using Polymorphic Iterator ===")
    print_list(MyList(5, 3).create_iterator())
    print_list(SkipList(6, 7).create_iterator())

    print("=== Using Internal Iterator ===")
    items = MyList(5, 3)
    multiply = MultiplyBy(items, 3)
    display = DisplayList(items)
    display.traverse()
    print()
    multiply.traverse()
    display.traverse()
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())