"""Exceptions raised by the row-reduction engine."""


class ReductionError(Exception):
    """Base class for every error raised while reducing a matrix."""


class DimensionMismatchError(ReductionError, ValueError):
    """The augmented block does not have the same number of rows as A."""

    def __init__(self, rows_a: int, rows_b: int):
        self.rows_a = rows_a
        self.rows_b = rows_b
        super().__init__(
            f"b must have the same number of rows as A "
            f"(A has {rows_a}, b has {rows_b})"
        )


class ZeroPivotError(ReductionError):
    """A row operation was asked to work against a zero pivot."""

    def __init__(self, row: int):
        self.row = row
        super().__init__(f"Zero at pivot A({row + 1}, {row + 1})")


class SelfReduceError(ReductionError):
    """An elimination was requested with the pivot row as its target."""

    def __init__(self, row: int):
        self.row = row
        super().__init__(f"Trying to reduce row {row + 1} with itself")
