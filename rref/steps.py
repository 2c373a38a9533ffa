"""
Step recording for the Gauss–Jordan trace.

A ``Step`` is one reported unit of work: the snapshot of ``[A|b]`` after
the operation plus the operations that produced it.  ``StepRecorder``
performs the row operations on the working matrices and appends Steps to
a ``Trace``, either one per operation or, for eliminations, one combined
Step per pivot column.
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from rref.config import ReduceConfig
from rref.formatter import format_number, render_matrix
from rref.operations import eliminate_row, normalize_pivot, swap_rows

logger = logging.getLogger(__name__)

SWAP = "swap"
SCALE = "scale"
ELIMINATE = "eliminate"

ORIGINAL_LABEL = "Original Matrix"


@dataclass(frozen=True)
class RowOperation:
    """One elementary row operation, rows 0-based."""

    kind: str
    target: int
    source: int | None = None
    scale: float | None = None

    def describe(self, number_format: str = "%.3f") -> str:
        """Plain-text form, rows shown 1-based (``row 2 = row 2 − 4.000 · row 1``)."""
        t = self.target + 1
        if self.kind == SWAP:
            return f"row {t} ↔ row {self.source + 1}"
        if self.kind == SCALE:
            return f"row {t} = {format_number(self.scale, number_format)} · row {t}"
        # Show "+ |s|" rather than "− -s"
        sign = "+" if self.scale < 0 else "−"
        s = format_number(abs(self.scale), number_format)
        return f"row {t} = row {t} {sign} {s} · row {self.source + 1}"


@dataclass(frozen=True, eq=False)
class Step:
    """Snapshot of ``[A|b]`` after ``operations`` were applied."""

    matrix: np.ndarray
    augment: np.ndarray | None
    operations: tuple = ()
    rendered: str = ""
    combined: bool = False

    @property
    def is_original(self) -> bool:
        return not self.operations

    @property
    def shape(self) -> tuple:
        """(rows, columns of A plus columns of b)."""
        p = 0 if self.augment is None else self.augment.shape[1]
        return (self.matrix.shape[0], self.matrix.shape[1] + p)

    def annotation_lines(self, number_format: str = "%.3f") -> list[str]:
        if self.is_original:
            return [ORIGINAL_LABEL]
        return [op.describe(number_format) for op in self.operations]


@dataclass
class Trace:
    """Append-only, ordered sequence of Steps for one reduction."""

    config: ReduceConfig = field(default_factory=ReduceConfig)
    steps: list = field(default_factory=list)
    pivot_columns: list = field(default_factory=list)

    def append(self, step: Step) -> None:
        self.steps.append(step)

    @property
    def rank(self) -> int:
        """Number of columns that received a pivot."""
        return len(self.pivot_columns)

    def __iter__(self):
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index):
        return self.steps[index]

    @property
    def final(self) -> Step:
        if not self.steps:
            raise IndexError("Trace is empty.")
        return self.steps[-1]


def _frozen_copy(arr: np.ndarray | None) -> np.ndarray | None:
    if arr is None:
        return None
    snapshot = arr.copy()
    snapshot.setflags(write=False)
    return snapshot


class StepRecorder:
    """Apply row operations to the working ``[A|b]`` and record Steps.

    *A* and *b* are mutated in place; *b* is ``None`` when there is no
    augmented block.
    """

    def __init__(self, A: np.ndarray, b: np.ndarray | None = None,
                 config: ReduceConfig | None = None):
        self.A = A
        self.b = b
        self.config = config or ReduceConfig()
        self.trace = Trace(config=self.config)

    def _record(self, operations: tuple, combined: bool = False) -> Step:
        step = Step(
            matrix=_frozen_copy(self.A),
            augment=_frozen_copy(self.b),
            operations=operations,
            combined=combined,
            rendered=render_matrix(self.A, self.b, self.config.number_format),
        )
        self.trace.append(step)
        logger.debug("step %d: %s", len(self.trace),
                     "; ".join(step.annotation_lines(self.config.number_format)))
        return step

    def record_original(self) -> Step:
        return self._record(())

    def swap(self, i: int, j: int) -> None:
        swap_rows(self.A, self.b, i, j)
        self._record((RowOperation(SWAP, i, j),))

    def normalize(self, row: int) -> float:
        """Put a 1 at the pivot; recorded only when the scale is not 1."""
        scale = normalize_pivot(self.A, self.b, row)
        if scale != 1.0:
            self._record((RowOperation(SCALE, row, scale=scale),))
        return scale

    def eliminate_column(self, pivot_row: int, targets) -> None:
        """Zero the pivot column in every row of *targets*.

        Each elimination reads only the pivot row, which none of them
        modifies, so the combined Step equals applying them one by one.
        """
        ops = []
        for target in sorted(targets):
            scale = eliminate_row(self.A, self.b, pivot_row, target)
            op = RowOperation(ELIMINATE, target, pivot_row, scale)
            if self.config.show_all_steps:
                self._record((op,))
            else:
                ops.append(op)
        if ops:
            self._record(tuple(ops), combined=True)
