"""Gauss–Jordan reduction to RREF with a step-by-step LaTeX derivation."""

from rref.config import ReduceConfig, DEFAULT_SETTINGS, load_settings, save_settings
from rref.engine import reduce, reduce_trace, solve_rref, trace_to_result
from rref.errors import (
    ReductionError, DimensionMismatchError, ZeroPivotError, SelfReduceError,
)
from rref.latex import render_document, write_trace
from rref.steps import RowOperation, Step, Trace, StepRecorder

__all__ = [
    "ReduceConfig", "DEFAULT_SETTINGS", "load_settings", "save_settings",
    "reduce", "reduce_trace", "solve_rref", "trace_to_result",
    "ReductionError", "DimensionMismatchError", "ZeroPivotError", "SelfReduceError",
    "render_document", "write_trace",
    "RowOperation", "Step", "Trace", "StepRecorder",
]
