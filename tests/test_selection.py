from __future__ import annotations

import dataclasses

import pytest

from rediff_engine.editor import Selection


def test_between_orders_forward_selection() -> None:
    selection = Selection.between(2, 7)

    assert selection.range() == (2, 7)
    assert not selection.reversed
    assert selection.tail() == 2
    assert selection.head() == 7


def test_between_orders_backward_selection() -> None:
    selection = Selection.between(7, 2)

    assert selection.range() == (2, 7)
    assert selection.reversed
    assert selection.tail() == 7
    assert selection.head() == 2


def test_empty_selection() -> None:
    selection = Selection.between(4, 4)

    assert selection.is_empty()
    assert len(selection) == 0
    assert not selection.reversed
    assert selection.head() == selection.tail() == 4


def test_len_counts_characters() -> None:
    assert len(Selection.between(10, 3)) == 7
    assert not Selection.between(10, 3).is_empty()


def test_direct_construction_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        Selection(start=5, end=1)


def test_selection_is_immutable() -> None:
    selection = Selection.between(0, 3)

    with pytest.raises(dataclasses.FrozenInstanceError):
        selection.start = 1  # type: ignore[misc]


def test_selections_compare_by_value() -> None:
    assert Selection.between(1, 4) == Selection(start=1, end=4)
    assert Selection.between(4, 1) != Selection(start=1, end=4)
