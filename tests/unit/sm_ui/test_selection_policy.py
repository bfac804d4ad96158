import pytest

from sm_ui.services.selection_policy import clear_selection, toggle_index

pytestmark = pytest.mark.unit_ui


def test_toggle_adds_missing_index() -> None:
    selected = (1,)
    assert toggle_index(selected, 3) == [1, 3]
    assert selected == (1,)


def test_toggle_removes_every_duplicate() -> None:
    assert toggle_index([2, 1, 2], 2) == [1]


def test_toggle_ignores_none() -> None:
    assert toggle_index([1], None) == [1]


def test_clear_selection() -> None:
    assert clear_selection() == []
