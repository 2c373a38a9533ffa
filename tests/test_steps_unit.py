"""Tests for RowOperation, Step, Trace and StepRecorder."""

import numpy as np
import pytest

from rref.config import ReduceConfig
from rref.steps import (
    ELIMINATE, SCALE, SWAP, RowOperation, StepRecorder, Trace,
)


class TestRowOperationDescribe:
    def test_swap(self):
        assert RowOperation(SWAP, 0, 1).describe() == "row 1 ↔ row 2"

    def test_scale(self):
        op = RowOperation(SCALE, 0, scale=0.25)
        assert op.describe() == "row 1 = 0.250 · row 1"

    def test_eliminate_positive_scale(self):
        op = RowOperation(ELIMINATE, 1, 0, 4.0)
        assert op.describe() == "row 2 = row 2 − 4.000 · row 1"

    def test_eliminate_negative_scale_flips_sign(self):
        op = RowOperation(ELIMINATE, 1, 0, -2.0)
        assert op.describe("%.1f") == "row 2 = row 2 + 2.0 · row 1"


def _recorder(rows, b=None, show_all_steps=False):
    A = np.array(rows, dtype=float)
    b = None if b is None else np.array(b, dtype=float)
    return StepRecorder(A, b, ReduceConfig(show_all_steps=show_all_steps))


class TestStepRecorder:
    def test_original_step(self):
        rec = _recorder([[1, 2], [3, 4]])
        step = rec.record_original()
        assert step.is_original
        assert step.annotation_lines() == ["Original Matrix"]
        assert len(rec.trace) == 1

    def test_swap_records_step(self):
        rec = _recorder([[0, 2], [1, 1]], b=[[1], [2]])
        rec.swap(0, 1)
        step = rec.trace.final
        assert step.operations == (RowOperation(SWAP, 0, 1),)
        np.testing.assert_array_equal(step.matrix, [[1, 1], [0, 2]])
        np.testing.assert_array_equal(step.augment, [[2], [1]])

    def test_normalize_unit_pivot_is_not_recorded(self):
        rec = _recorder([[1, 2], [3, 4]])
        assert rec.normalize(0) == 1.0
        assert len(rec.trace) == 0

    def test_normalize_records_scale(self):
        rec = _recorder([[2, 2], [3, 4]])
        assert rec.normalize(0) == 0.5
        assert rec.trace.final.annotation_lines() == ["row 1 = 0.500 · row 1"]

    def test_coalesced_elimination_is_one_step_in_row_order(self):
        rec = _recorder([[1, 2], [3, 4], [5, 6]])
        rec.eliminate_column(0, [2, 1])
        assert len(rec.trace) == 1
        ops = rec.trace.final.operations
        assert [op.target for op in ops] == [1, 2]
        assert [op.scale for op in ops] == [3.0, 5.0]
        np.testing.assert_array_equal(rec.A[:, 0], [1, 0, 0])

    def test_show_all_steps_records_each_row(self):
        rec = _recorder([[1, 2], [3, 4], [5, 6]], show_all_steps=True)
        rec.eliminate_column(0, [1, 2])
        assert len(rec.trace) == 2
        assert all(len(step.operations) == 1 for step in rec.trace)
        np.testing.assert_array_equal(rec.trace[0].matrix[:, 0], [1, 0, 5])

    def test_no_targets_records_nothing(self):
        rec = _recorder([[1, 2], [0, 4]])
        rec.eliminate_column(0, [])
        assert len(rec.trace) == 0

    def test_snapshots_are_independent_and_read_only(self):
        rec = _recorder([[1, 2], [3, 4]])
        step = rec.record_original()
        rec.A[0, 0] = 99.0
        assert step.matrix[0, 0] == 1.0
        with pytest.raises(ValueError):
            step.matrix[0, 0] = 5.0

    def test_rendered_uses_configured_format(self):
        A = np.array([[1.0, 0.5]])
        rec = StepRecorder(A, None, ReduceConfig(number_format="%.1f"))
        step = rec.record_original()
        assert "1.0 & 0.5" in step.rendered

    def test_shape_counts_augmented_columns(self):
        rec = _recorder([[1, 2], [3, 4]], b=[[1, 0], [0, 1]])
        assert rec.record_original().shape == (2, 4)


def test_empty_trace_has_no_final_step() -> None:
    with pytest.raises(IndexError):
        Trace().final
