import pytest

pytest.importorskip("pygame")

from ui import ENTRY_GAP, ENTRY_H, history_entry_at, pixel_to_cell  # noqa: E402


def test_pixel_to_cell_row_major():
    origin = (10, 20)
    assert pixel_to_cell(10, 20, origin, 50) == 0
    assert pixel_to_cell(159, 20, origin, 50) == 2
    assert pixel_to_cell(60, 70, origin, 50) == 4
    assert pixel_to_cell(10, 120, origin, 50) == 6
    assert pixel_to_cell(159, 169, origin, 50) == 8


def test_pixel_to_cell_off_board():
    origin = (10, 20)
    assert pixel_to_cell(9, 20, origin, 50) is None
    assert pixel_to_cell(160, 20, origin, 50) is None
    assert pixel_to_cell(10, 170, origin, 50) is None


def test_history_entry_at():
    origin = (300, 100)
    step = ENTRY_H + ENTRY_GAP
    assert history_entry_at(300, 100, origin, 200, 3) == 0
    assert history_entry_at(350, 100 + step + 1, origin, 200, 3) == 1
    assert history_entry_at(499, 100 + 2 * step, origin, 200, 3) == 2
    # past the last entry
    assert history_entry_at(300, 100 + 3 * step, origin, 200, 3) is None
    # in the gap between entries
    assert history_entry_at(300, 100 + ENTRY_H, origin, 200, 3) is None
    # outside horizontally or above
    assert history_entry_at(500, 100, origin, 200, 3) is None
    assert history_entry_at(300, 99, origin, 200, 3) is None
