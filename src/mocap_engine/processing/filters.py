"""Confidence-weighted temporal smoothing of marker trajectories."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from mocap_engine.core.exceptions import InvalidArgumentError
from mocap_engine.core.logging import get_logger
from mocap_engine.core.types import Frame, MarkerId, MarkerSample, MotionSequence, Point
from mocap_engine.processing.geometry import weighted_mean

logger = get_logger(__name__)


class MarkerTrack:
    """Per-marker sample arrays across a whole sequence.

    Absent and invisible samples are stored with zero weight so that they
    never contribute to an average.
    """

    def __init__(self, sequence: MotionSequence, marker_id: MarkerId) -> None:
        n = len(sequence)
        self.marker_id = marker_id
        self.xy: NDArray[np.floating[Any]] = np.zeros((n, 2), dtype=np.float64)
        self.weights: NDArray[np.floating[Any]] = np.zeros(n, dtype=np.float64)
        self.valid: NDArray[np.bool_] = np.zeros(n, dtype=bool)

        for i, frame in enumerate(sequence):
            sample = frame.visible(marker_id)
            if sample is None:
                continue
            self.xy[i] = (sample.x, sample.y)
            self.weights[i] = sample.confidence
            self.valid[i] = True

    def window_mean(self, lo: int, hi: int) -> Point | None:
        """Confidence-weighted mean over frames ``lo..hi`` inclusive.

        Returns:
            Mean position, or None when no visible sample or zero total
            confidence falls in the window
        """
        valid = self.valid[lo : hi + 1]
        points = [Point(float(x), float(y)) for x, y in self.xy[lo : hi + 1][valid]]
        return weighted_mean(points, self.weights[lo : hi + 1][valid])


def smooth(sequence: MotionSequence, window_size: int) -> MotionSequence:
    """Sliding-window, confidence-weighted smoothing of every marker.

    Windows are clipped at the sequence boundaries (no padding), so the
    first and last frames use smaller, asymmetric windows. Only position is
    smoothed; each output sample keeps the confidence and visibility of the
    frame it belongs to.

    Args:
        sequence: Input sequence (not modified)
        window_size: Window length in frames, normally odd

    Returns:
        Sequence of the same length and key sets

    Raises:
        InvalidArgumentError: If window_size is not a positive integer
    """
    if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size < 1:
        raise InvalidArgumentError(f"window_size must be a positive integer, got {window_size!r}")

    if window_size == 1 or len(sequence) <= 1:
        return sequence.with_frames(sequence.frames)

    half = window_size // 2
    last = len(sequence) - 1

    marker_ids: set[MarkerId] = set()
    for frame in sequence:
        marker_ids.update(frame.markers)
    tracks = {marker_id: MarkerTrack(sequence, marker_id) for marker_id in marker_ids}

    smoothed: list[Frame] = []
    for i, frame in enumerate(sequence):
        lo = max(0, i - half)
        hi = min(last, i + half)

        markers: dict[MarkerId, MarkerSample] = {}
        for marker_id, sample in frame.markers.items():
            mean = tracks[marker_id].window_mean(lo, hi)
            markers[marker_id] = sample if mean is None else sample.with_position(mean)
        smoothed.append(frame.with_markers(markers))

    logger.debug(
        "Smoothed %d frames, %d markers, window %d",
        len(smoothed),
        len(marker_ids),
        window_size,
    )
    return sequence.with_frames(smoothed)
