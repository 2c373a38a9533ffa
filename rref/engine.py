""" Step-by-step Gauss–Jordan elimination to reduced row echelon form."""

"""
Columns are processed left to right.  For each column with a nonzero
entry at or below the diagonal, the largest entry (partial pivoting) is
swapped onto the diagonal, scaled to 1, and every other row is cleared
in that column.  Each reported operation becomes a Step in the Trace.
"""

import logging
import sys
import time
from datetime import datetime

import numpy as np

from rref.config import ReduceConfig
from rref.errors import DimensionMismatchError, ZeroPivotError
from rref.formatter import format_number
from rref.latex import render_document, write_trace
from rref.parsing import as_matrix
from rref.pivot import has_pivot, select_pivot
from rref.steps import ELIMINATE, SCALE, SWAP, StepRecorder, Trace

logger = logging.getLogger(__name__)


def _prepare(A, b) -> tuple:
    """Validate the input and return float working copies of A and b."""
    A = as_matrix(A, "A").copy()
    if A.shape[0] < 1 or A.shape[1] < 1:
        raise ValueError("A must have at least one row and one column.")
    if b is None or (isinstance(b, str) and not b.strip()) or np.size(b) == 0:
        return A, None
    b = as_matrix(b, "b").copy()
    if b.shape[0] != A.shape[0]:
        raise DimensionMismatchError(A.shape[0], b.shape[0])
    return A, b


def _reduce_column(recorder: StepRecorder, i: int) -> None:
    """Pivot, normalize and eliminate around ``A[i, i]``."""
    A = recorder.A

    idx = select_pivot(A, i, i)
    if idx != i:
        logger.debug("column %d: pivot in row %d, swapping", i + 1, idx + 1)
        recorder.swap(i, idx)

    if A[i, i] == 0.0:
        # unreachable while has_pivot gates the column
        raise ZeroPivotError(i)

    recorder.normalize(i)

    targets = [j for j in range(A.shape[0]) if j != i and A[j, i] != 0]
    recorder.eliminate_column(i, targets)


def reduce_trace(A, b=None, config: ReduceConfig | None = None) -> Trace:
    """Reduce ``[A|b]`` to RREF and return the Trace of reported Steps.

    *A* and *b* may be arrays, nested lists or matrix text; they are
    copied, never modified.  Raises ``DimensionMismatchError`` before any
    Step is recorded when b's row count differs from A's.
    """
    config = config or ReduceConfig()
    A, b = _prepare(A, b)
    n, m = A.shape

    recorder = StepRecorder(A, b, config)
    recorder.record_original()

    for i in range(min(n, m)):
        if not has_pivot(A, i, i):
            logger.debug("column %d: no pivot at or below row %d, skipped", i + 1, i + 1)
            continue
        _reduce_column(recorder, i)
        recorder.trace.pivot_columns.append(i)

    trace = recorder.trace
    logger.info("reduced %dx%d matrix: rank %d, %d steps", n, m, trace.rank, len(trace))
    return trace


def reduce(A, b=None, sink=None, config: ReduceConfig | None = None) -> Trace:
    """Reduce ``[A|b]`` and write the LaTeX derivation to *sink*.

    *sink* is any object with ``write(str)``; standard output by default.
    The whole Trace is built before the first write, so a failing input
    produces no output.
    """
    trace = reduce_trace(A, b, config)
    write_trace(trace, sink if sink is not None else sys.stdout)
    return trace


# ── Result trail (CLI --json and the HTTP API) ──────────────────────────

_EXPLANATIONS = {
    SWAP: "Swap rows so the entry with the largest absolute value becomes the pivot.",
    SCALE: "Scale the pivot row so the pivot becomes 1.",
    ELIMINATE: "Subtract a multiple of the pivot row to put a 0 in the pivot column.",
}


def _explain(step) -> str:
    if step.is_original:
        return "The matrix as given, before any row operation."
    kinds = {op.kind for op in step.operations}
    if kinds == {ELIMINATE} and len(step.operations) > 1:
        return "Subtract multiples of the pivot row to clear the rest of the pivot column."
    return _EXPLANATIONS[step.operations[0].kind]


def _matrix_text(arr: np.ndarray, number_format: str) -> list:
    return [[format_number(v, number_format) for v in row] for row in arr]


def trace_to_result(trace: Trace, runtime_ms: float | None = None) -> dict:
    """Convert *trace* into the trail dict (given, method, steps, ...)."""
    number_format = trace.config.number_format
    first, last = trace[0], trace.final

    steps = []
    for i, step in enumerate(trace, start=1):
        steps.append({
            "step_number": i,
            "description": "\n".join(step.annotation_lines(number_format)),
            "expression": step.rendered,
            "explanation": _explain(step),
        })

    n, cols = first.shape
    given = {
        "problem": "Reduce the matrix to reduced row echelon form.",
        "inputs": {
            "rows": n,
            "columns": first.matrix.shape[1],
            "augmented_columns": cols - first.matrix.shape[1],
            "matrix": _matrix_text(first.matrix, number_format),
        },
    }
    if first.augment is not None:
        given["inputs"]["augment"] = _matrix_text(first.augment, number_format)

    method = {
        "name": "Gauss–Jordan Elimination",
        "description": "Partial pivoting, then scale each pivot to 1 and clear its column.",
        "parameters": {
            "show_all_steps": trace.config.show_all_steps,
            "number_format": number_format,
        },
    }

    final_answer = {"matrix": _matrix_text(last.matrix, number_format)}
    if last.augment is not None:
        final_answer["augment"] = _matrix_text(last.augment, number_format)

    summary = {
        "runtime_ms": runtime_ms,
        "total_steps": len(steps),
        "rank": trace.rank,
        "pivot_columns": [c + 1 for c in trace.pivot_columns],
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "library": f"NumPy {np.__version__}",
    }

    return {
        "given": given,
        "method": method,
        "steps": steps,
        "final_answer": final_answer,
        "latex": render_document(trace),
        "summary": summary,
    }


def solve_rref(A, b=None, config: ReduceConfig | None = None) -> dict:
    """Reduce ``[A|b]`` and return the trail dict, timed."""
    t_start = time.perf_counter()
    trace = reduce_trace(A, b, config)
    runtime_ms = round((time.perf_counter() - t_start) * 1000, 2)
    return trace_to_result(trace, runtime_ms)
