"""Counting sort for small non-negative integers."""

import sys

MAX_ELEMENTS = 100
MAX_RANGE_VALUE = 1000


def counting_sort(values, max_value=None):
    """Return ``values`` sorted ascending using a counting sort.

    Every value must lie in ``0..max_value``; ``max_value`` defaults to the
    largest value and may not exceed ``MAX_RANGE_VALUE``.  At most
    ``MAX_ELEMENTS`` values are accepted.
    """
    values = list(values)
    if len(values) > MAX_ELEMENTS:
        raise ValueError(f"at most {MAX_ELEMENTS} values can be sorted")
    if not values:
        return []
    if max_value is None:
        max_value = max(values)
    if not 0 <= max_value <= MAX_RANGE_VALUE:
        raise ValueError(f"max_value must lie in 0..{MAX_RANGE_VALUE}")
    counts = [0] * (max_value + 1)
    for value in values:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside 0..{max_value}")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def main(argv=None):
    """Read a count and that many integers from stdin and print them sorted."""
    tokens = sys.stdin.read().split()
    print("Enter no of elements : ", end="")
    try:
        count = int(tokens[0])
        if not 0 <= count <= MAX_ELEMENTS:
            raise ValueError(f"element count must lie in 0..{MAX_ELEMENTS}")
        print("Enter all elements : ", end="")
        values = [int(token) for token in tokens[1 : count + 1]]
        if len(values) < count:
            raise ValueError(f"expected {count} elements, got {len(values)}")
        if count > 1:
            values = counting_sort(values, max(values))
    except (IndexError, ValueError) as exc:
        message = exc if isinstance(exc, ValueError) else "no element count given"
        print(f"\nError: {message}", file=sys.stderr)
        return 1
    print("\nAfter sorting ")
    print("".join(f"{value} " for value in values), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())