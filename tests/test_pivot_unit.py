import numpy as np
import pytest

from rref.pivot import has_pivot, select_pivot


@pytest.mark.parametrize(
    "rows,column,start,expected",
    [
        ([[0, 2], [1, 1]], 0, 0, 1),
        ([[4, 3], [6, 3]], 0, 0, 1),
        ([[9, 0], [1, 0], [-2, 0]], 0, 1, 2),
        ([[1, 5], [0, -7], [0, 7]], 1, 1, 1),
    ],
)
def test_select_pivot_picks_largest_absolute_value(rows, column, start, expected) -> None:
    A = np.array(rows, dtype=float)
    assert select_pivot(A, column, start) == expected


def test_select_pivot_ties_go_to_lowest_row() -> None:
    A = np.array([[1.0, 0.0], [3.0, 0.0], [-3.0, 0.0]])
    assert select_pivot(A, 0, 0) == 1
    # the diagonal row wins a tie, so no swap would be needed
    B = np.array([[-2.0, 1.0], [2.0, 1.0]])
    assert select_pivot(B, 0, 0) == 0


def test_select_pivot_has_no_side_effects() -> None:
    A = np.array([[0.0, 2.0], [1.0, 1.0]])
    before = A.copy()
    select_pivot(A, 0, 0)
    np.testing.assert_array_equal(A, before)


def test_has_pivot() -> None:
    A = np.array([[5.0, 1.0], [0.0, 0.0]])
    assert has_pivot(A, 0, 0)
    assert not has_pivot(A, 0, 1)
    assert not has_pivot(A, 1, 1)
    assert has_pivot(np.array([[0.0], [-1e-3]]), 0, 0)
