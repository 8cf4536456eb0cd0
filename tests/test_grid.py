from typing import List, Tuple

import numpy as np
import pytest

from gridbench.model.grid import GridModel
from tests.test_utils import ScriptedRandom


@pytest.mark.parametrize("rows, columns", [(1, 1), (2, 2), (3, 7), (25, 25), (10, 4)])
def test_new_grid_is_all_zero_and_described(rows: int, columns: int) -> None:
    grid = GridModel(rows, columns)

    assert grid.row_count == rows
    assert grid.column_count == columns
    assert len(grid.rows) == rows
    assert all(len(row) == columns for row in grid.rows)
    assert not grid.values().any()
    assert grid.describe() == f"{rows}x{columns} ({rows * columns} cells)"
    assert str(grid) == grid.describe()
    assert grid.cell_count == rows * columns


def test_column_count_defaults_to_row_count() -> None:
    grid = GridModel(5)
    assert grid.column_count == 5
    assert grid.values().shape == (5, 5)


@pytest.mark.parametrize("rows, columns", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_dimensions_are_rejected(rows: int, columns: int) -> None:
    with pytest.raises(ValueError):
        GridModel(rows, columns)


def test_describe_dimensions_matches_describe() -> None:
    assert GridModel.describe_dimensions(400, 400) == "400x400 (160000 cells)"
    assert GridModel.describe_dimensions(3, 4) == GridModel(3, 4).describe()


def test_values_stay_in_range_over_many_updates() -> None:
    grid = GridModel(4, 3, seed=1234)
    for _ in range(2000):
        grid.update_single_cell(restrict_to_first_row=False)
    values = grid.values()
    assert values.min() >= 0
    assert values.max() <= 9


def test_single_cell_wraps_after_nine() -> None:
    grid = GridModel(1, 1)
    for _ in range(9):
        grid.update_single_cell(restrict_to_first_row=False)
    assert grid.cell(0, 0).content == 9

    grid.update_single_cell(restrict_to_first_row=False)
    assert grid.cell(0, 0).content == 0


def test_update_draws_row_then_column() -> None:
    rng = ScriptedRandom([2, 1])
    grid = GridModel(3, 4, rng=rng)

    grid.update_single_cell(restrict_to_first_row=False)

    assert rng.calls == [(0, 3), (0, 4)]
    assert grid.cell(2, 1).content == 1
    assert int(grid.values().sum()) == 1


def test_top_row_only_never_touches_other_rows() -> None:
    grid = GridModel(6, 5, seed=7)
    for _ in range(500):
        grid.update_single_cell(restrict_to_first_row=True)

    values = grid.values()
    assert not values[1:].any()
    assert int(values[0].sum()) > 0


def test_top_row_only_draws_column_only() -> None:
    rng = ScriptedRandom([0, 1, 0])
    grid = GridModel(2, 2, rng=rng)

    for _ in range(3):
        grid.update_single_cell(restrict_to_first_row=True)

    assert rng.calls == [(0, 2), (0, 2), (0, 2)]
    assert grid.rows[0].values() == [2, 1]
    assert grid.rows[1].values() == [0, 0]


def test_clear_is_idempotent() -> None:
    grid = GridModel(5, 5, seed=3)
    for _ in range(100):
        grid.update_single_cell(restrict_to_first_row=False)

    grid.clear()
    once = grid.values()
    grid.clear()

    assert not once.any()
    np.testing.assert_array_equal(once, grid.values())


def test_same_seed_gives_same_sequence() -> None:
    first = GridModel(8, 8, seed=99)
    second = GridModel(8, 8, seed=99)
    for _ in range(300):
        first.update_single_cell(restrict_to_first_row=False)
        second.update_single_cell(restrict_to_first_row=False)
    np.testing.assert_array_equal(first.values(), second.values())


def test_update_emits_cell_changed() -> None:
    grid = GridModel(3, 3, rng=ScriptedRandom([1, 2, 1, 2]))
    received: List[Tuple[int, int, int]] = []
    grid.cell_changed.connect(lambda r, c, v: received.append((r, c, v)))

    grid.update_single_cell(restrict_to_first_row=False)
    grid.update_single_cell(restrict_to_first_row=False)

    assert received == [(1, 2, 1), (1, 2, 2)]


def test_clear_emits_cleared() -> None:
    grid = GridModel(2, 2)
    calls: List[bool] = []
    grid.cleared.connect(lambda: calls.append(True))

    grid.clear()

    assert calls == [True]
