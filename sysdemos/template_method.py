"""Template method: a fixed processing outline with pluggable sorting."""

import sys
from abc import ABC, abstractmethod
from typing import final


class Sort(ABC):
    """Reads, shows, sorts and shows a list of integers in place."""

    def __init__(self, out=None):
        self.out = out

    def _write(self, text):
        print(text, end="", file=self.out if self.out is not None else sys.stdout)

    def read_data(self, values):
        """Hook for filling ``values``; does nothing by default."""

    def write_data(self, values):
        """Write each value followed by a space."""
        self._write("".join(f"{value} " for value in values))

    @abstractmethod
    def sort_data(self, values):
        """Sort ``values`` in place."""

    @final
    def process_data(self, values):
        """Run the whole outline on ``values`` and return it."""
        self.read_data(values)
        self._write("Before sort: ")
        self.write_data(values)
        self._write("\n")
        self.sort_data(values)
        self._write("After sort: ")
        self.write_data(values)
        self._write("\n")
        return values


class SelectionSort(Sort):
    """Appends 9 down to 1 and sorts ascending by selection."""

    def read_data(self, values):
        values.extend(10 - number for number in range(1, 10))

    def sort_data(self, values):
        for start in range(len(values) - 1):
            smallest = min(range(start, len(values)), key=values.__getitem__)
            values[start], values[smallest] = values[smallest], values[start]


class BubbleDescendingSort(Sort):
    """Appends 1 to 9 and sorts descending by bubbling."""

    def read_data(self, values):
        values.extend(range(1, 10))

    def sort_data(self, values):
        for settled in range(len(values) - 1):
            for pos in range(len(values) - settled - 1):
                if values[pos] < values[pos + 1]:
                    values[pos], values[pos + 1] = values[pos + 1], values[pos]


def main(argv=None):
    """Run both sorts through the shared outline."""
    print("Selection sort: ")
    SelectionSort().process_data([])
    print("Bubble descending sort: ")
    BubbleDescendingSort().process_data([])
    return 0


if __name__ == "__main__":
    sys.exit(main())