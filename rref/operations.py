"""
Elementary row operations on ``[A|b]``.

Every function mutates A (and b, when given) in place and applies exactly
the same scalar and row indices to both blocks.
"""

import numpy as np

from rref.errors import SelfReduceError, ZeroPivotError


def _has_augment(b) -> bool:
    return b is not None and np.size(b) > 0


def normalize_pivot(A: np.ndarray, b: np.ndarray | None, row: int) -> float:
    """Scale row *row* so that ``A[row, row] == 1``.

    Returns the scale such that ``row_out = scale * row_in``.  A scale of
    exactly 1 means nothing visibly changed.
    """
    pivot = A[row, row]
    if pivot == 0:
        raise ZeroPivotError(row)
    scale = 1.0 / pivot
    A[row, :] = A[row, :] * scale
    # 1/p * p can round to 0.9999999999999999
    A[row, row] = 1.0
    if _has_augment(b):
        b[row, :] = b[row, :] * scale
    return float(scale)


def eliminate_row(A: np.ndarray, b: np.ndarray | None,
                  pivot_row: int, target_row: int) -> float:
    """Zero ``A[target_row, pivot_row]`` by subtracting a multiple of the pivot row.

    Returns the scale such that
    ``row_out[target] = row_in[target] - scale * row[pivot]``.
    """
    if pivot_row == target_row:
        raise SelfReduceError(pivot_row)
    pivot = A[pivot_row, pivot_row]
    if pivot == 0:
        raise ZeroPivotError(pivot_row)
    scale = A[target_row, pivot_row] / pivot
    A[target_row, :] = A[target_row, :] - scale * A[pivot_row, :]
    A[target_row, pivot_row] = 0.0
    if _has_augment(b):
        b[target_row, :] = b[target_row, :] - scale * b[pivot_row, :]
    return float(scale)


def swap_rows(A: np.ndarray, b: np.ndarray | None, i: int, j: int) -> None:
    """Exchange rows *i* and *j*; no-op when they are the same row."""
    if i == j:
        return
    A[[i, j], :] = A[[j, i], :]
    if _has_augment(b):
        b[[i, j], :] = b[[j, i], :]
