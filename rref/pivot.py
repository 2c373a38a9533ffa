"""Partial pivoting helpers."""

import numpy as np


def has_pivot(A: np.ndarray, column: int, start_row: int) -> bool:
    """True if column *column* has a nonzero entry at or below *start_row*."""
    return float(np.sum(np.abs(A[start_row:, column]))) != 0.0


def select_pivot(A: np.ndarray, column: int, start_row: int) -> int:
    """Return the row (>= *start_row*) holding the largest ``|A[row, column]|``.

    For numerical stability the largest absolute value is chosen; ties go
    to the lowest row index, so the current diagonal row wins any tie.
    The caller must check ``has_pivot`` first.
    """
    candidates = np.abs(A[start_row:, column])
    # argmax returns the first occurrence of the maximum
    return start_row + int(np.argmax(candidates))
