"""Tests for temporal synchronization of two sequences."""

from __future__ import annotations

import numpy as np
import pytest

from mocap_engine.core.exceptions import InvalidArgumentError
from mocap_engine.processing.sync import align, find_offset, motion_magnitudes


class TestMotionMagnitudes:
    """Tests for the motion signal."""

    def test_mean_displacement_per_frame_pair(self, make_sequence) -> None:
        """Each entry averages displacement over shared visible markers."""
        sequence = make_sequence(
            [
                {"A": (0.0, 0.0), "B": (0.0, 0.0)},
                {"A": (3.0, 4.0), "B": (0.0, 1.0)},
                {"A": (3.0, 4.0), "B": (0.0, 1.0)},
            ]
        )

        np.testing.assert_allclose(motion_magnitudes(sequence), [3.0, 0.0])

    def test_ignores_markers_not_visible_in_both(self, make_sequence) -> None:
        """Markers invisible or absent in either frame do not count."""
        sequence = make_sequence(
            [
                {"A": (0.0, 0.0), "B": (0.0, 0.0, 1.0, False)},
                {"A": (1.0, 0.0), "B": (50.0, 0.0), "C": (9.0, 9.0)},
                {"Z": (0.0, 0.0)},
            ]
        )

        np.testing.assert_allclose(motion_magnitudes(sequence), [1.0, 0.0])

    def test_short_sequences(self, make_sequence) -> None:
        """Fewer than two frames give an empty signal."""
        assert motion_magnitudes(make_sequence([])).size == 0
        assert motion_magnitudes(make_sequence([{"A": (0.0, 0.0)}])).size == 0


class TestFindOffset:
    """Tests for the offset search."""

    def test_identical_sequences_have_zero_offset(self, make_step_sequence) -> None:
        """A sequence correlates best with itself unshifted."""
        sequence = make_step_sequence(20, 5)

        result = find_offset(sequence, sequence, 10)

        assert result.offset == 0
        assert result.score == pytest.approx(10.0)

    def test_detects_positive_lag(self, make_step_sequence) -> None:
        """Motion later in B than in A gives a positive offset."""
        result = find_offset(make_step_sequence(20, 5), make_step_sequence(20, 8), 10)

        assert result.offset == 3
        assert result.score == pytest.approx(10.0)

    def test_detects_negative_lag(self, make_step_sequence) -> None:
        """Motion earlier in B than in A gives a negative offset."""
        result = find_offset(make_step_sequence(20, 8), make_step_sequence(20, 5), 10)

        assert result.offset == -3
        assert result.score == pytest.approx(100.0 / 7)

    def test_self_alignment_constant_velocity(self, make_sequence) -> None:
        """Flat motion ties everywhere, so the first offset with a valid pair wins."""
        sequence = make_sequence([{"A": (float(i), 0.0)} for i in range(40)])

        result = find_offset(sequence, sequence, 10)

        # max_offset is 10; offset -10 has no valid pair inside a 10-frame window
        assert result.offset == -9
        assert result.score == pytest.approx(1.0)

    def test_self_alignment_growing_motion(self, make_sequence) -> None:
        """Steadily increasing motion favours the largest positive offset."""
        sequence = make_sequence([{"A": (0.5 * i * i, 0.0)} for i in range(40)])

        result = find_offset(sequence, sequence, 10)

        # motion[j] = j + 0.5, averaged (i + 0.5) * (i + 10.5) over i < 10
        assert result.offset == 10
        assert result.score == pytest.approx(83.25)

    def test_ties_keep_most_negative_offset(self, make_sequence) -> None:
        """With no motion every offset ties and the first scanned wins."""
        still = make_sequence([{"A": (1.0, 1.0)}] * 12)

        result = find_offset(still, still, 6)

        assert result.offset == -3
        assert result.score == 0.0

    def test_empty_window_compares_nothing(self, make_step_sequence) -> None:
        """A zero-length window evaluates no offset."""
        sequence = make_step_sequence(12, 2)

        result = find_offset(sequence, sequence, 0)

        assert result.offset == 0
        assert result.score is None

    def test_negative_window_rejected(self, make_step_sequence) -> None:
        """Negative windows are a contract violation."""
        sequence = make_step_sequence(12, 2)

        with pytest.raises(InvalidArgumentError):
            find_offset(sequence, sequence, -1)


class TestAlign:
    """Tests for align()."""

    def test_same_sequence_unchanged(self, make_step_sequence) -> None:
        """Aligning a sequence with itself changes nothing."""
        sequence = make_step_sequence(20, 5)

        aligned_a, aligned_b = align(sequence, sequence, 10)

        assert aligned_a == sequence
        assert aligned_b == sequence

    def test_self_alignment_can_trim(self, make_sequence) -> None:
        """Aligning a sequence with itself only keeps it whole when offset 0 scores best."""
        sequence = make_sequence([{"A": (0.5 * i * i, 0.0)} for i in range(40)])

        aligned_a, aligned_b = align(sequence, sequence, 10)

        assert len(aligned_a) == 30
        assert aligned_a[0] == sequence[10]
        assert aligned_b is sequence

    def test_positive_offset_trims_first_sequence(self, make_step_sequence) -> None:
        """A positive offset drops leading frames from the first sequence."""
        seq_a = make_step_sequence(20, 5)
        seq_b = make_step_sequence(20, 8)

        aligned_a, aligned_b = align(seq_a, seq_b, 10)

        assert len(aligned_a) == 17
        assert aligned_a[0] == seq_a[3]
        assert aligned_a.start_time == pytest.approx(3 / 30)
        assert aligned_b == seq_b

    def test_negative_offset_trims_second_sequence(self, make_step_sequence) -> None:
        """A negative offset drops leading frames from the second sequence."""
        seq_a = make_step_sequence(20, 8)
        seq_b = make_step_sequence(20, 5)

        aligned_a, aligned_b = align(seq_a, seq_b, 10)

        assert aligned_a == seq_a
        assert len(aligned_b) == 17
        assert aligned_b[0] == seq_b[3]

    def test_short_sequences_returned_unchanged(self, make_step_sequence) -> None:
        """Sequences shorter than the window are not aligned."""
        seq_a = make_step_sequence(8, 2)
        seq_b = make_step_sequence(20, 9)

        aligned_a, aligned_b = align(seq_a, seq_b, 10)

        assert aligned_a is seq_a
        assert aligned_b is seq_b

    def test_negative_window_rejected(self, make_step_sequence) -> None:
        """Negative windows are a contract violation."""
        sequence = make_step_sequence(12, 2)

        with pytest.raises(InvalidArgumentError):
            align(sequence, sequence, -2)
