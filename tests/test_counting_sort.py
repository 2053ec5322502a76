import io
import sys

import pytest

from sysdemos.counting_sort import MAX_ELEMENTS, MAX_RANGE_VALUE, counting_sort, main


@pytest.mark.parametrize(
    "values",
    [[5, 3, 1000, 0, 3], [1], [2, 2, 2], [9, 8, 7, 6, 5, 4, 3, 2, 1, 0], []],
)
def test_result_is_sorted_permutation(values):
    assert counting_sort(values) == sorted(values)


def test_explicit_max_value():
    values = [4, 1, 3]
    assert counting_sort(values, 10) == sorted(values)


def test_input_not_modified():
    values = [3, 1, 2]
    counting_sort(values)
    assert values == [3, 1, 2]


def test_accepts_full_capacity():
    values = list(range(MAX_ELEMENTS, 0, -1))
    assert counting_sort(values) == sorted(values)


def test_too_many_values():
    with pytest.raises(ValueError):
        counting_sort([1] * (MAX_ELEMENTS + 1))


def test_negative_value():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_value_above_max():
    with pytest.raises(ValueError):
        counting_sort([3, 7], 5)


def test_range_limit():
    with pytest.raises(ValueError):
        counting_sort([MAX_RANGE_VALUE + 1])


def test_main_prints_sorted(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n3 1 2 5 4\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "Enter no of elements : Enter all elements : \nAfter sorting \n1 2 3 4 5 "
    )


def test_main_single_element_unchanged(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n42\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("After sorting \n42 ")


def test_main_missing_elements(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1 2\n"))
    assert main([]) == 1


def test_main_too_many_elements(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"{MAX_ELEMENTS + 1}\n"))
    assert main([]) == 1