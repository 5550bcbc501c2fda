"""Temporal alignment of two independently captured sequences.

Both sequences are reduced to a per-frame motion magnitude signal, and the
integer frame offset with the highest average product of the two signals
is taken as the lag between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from mocap_engine.core.exceptions import InvalidArgumentError
from mocap_engine.core.logging import get_logger
from mocap_engine.core.types import MotionSequence
from mocap_engine.processing.geometry import distance

logger = get_logger(__name__)


@dataclass(frozen=True)
class SyncResult:
    """Outcome of an offset search."""

    offset: int  # Positive: seq_a leads, negative: seq_b leads
    score: float | None  # Average product at the chosen offset, None if nothing compared


def motion_magnitudes(sequence: MotionSequence) -> NDArray[np.floating[Any]]:
    """Mean marker displacement between each pair of adjacent frames.

    Only markers visible in both frames of a pair contribute; a pair with
    no such marker scores 0.

    Returns:
        Array of length ``len(sequence) - 1`` (empty for fewer than 2 frames)
    """
    frames = sequence.frames
    motion = np.zeros(max(len(frames) - 1, 0), dtype=np.float64)

    for i in range(1, len(frames)):
        current, previous = frames[i], frames[i - 1]
        steps = []
        for marker_id, sample in current.markers.items():
            before = previous.visible(marker_id)
            if sample.is_visible and before is not None:
                steps.append(distance(sample.position, before.position))
        if steps:
            motion[i - 1] = sum(steps) / len(steps)

    return motion


def find_offset(
    seq_a: MotionSequence,
    seq_b: MotionSequence,
    compare_window: int,
) -> SyncResult:
    """Search the frame offset that best aligns the two motion signals.

    Offsets are scanned from ``-max_offset`` to ``+max_offset`` where
    ``max_offset`` is a quarter of the shorter sequence. For offset ``k``,
    ``motion_a[i] * motion_b[i + k]`` is averaged over ``i`` in
    ``[0, compare_window)`` wherever both indices are valid. The first
    offset with the strictly greatest average wins.

    Raises:
        InvalidArgumentError: If compare_window is negative
    """
    if compare_window < 0:
        raise InvalidArgumentError(f"compare_window must be non-negative, got {compare_window}")

    motion_a = motion_magnitudes(seq_a)
    motion_b = motion_magnitudes(seq_b)
    max_offset = min(len(seq_a) // 4, len(seq_b) // 4)

    window = np.arange(compare_window)
    best_offset = 0
    best_score = -np.inf

    for offset in range(-max_offset, max_offset + 1):
        shifted = window + offset
        ok = (window < len(motion_a)) & (shifted >= 0) & (shifted < len(motion_b))
        if not ok.any():
            continue

        score = float(np.mean(motion_a[window[ok]] * motion_b[shifted[ok]]))
        if score > best_score:
            best_score = score
            best_offset = offset

    return SyncResult(
        offset=best_offset,
        score=None if np.isinf(best_score) else float(best_score),
    )


def align(
    seq_a: MotionSequence,
    seq_b: MotionSequence,
    compare_window: int,
) -> tuple[MotionSequence, MotionSequence]:
    """Trim leading frames so the two sequences start in step.

    Sequences shorter than ``compare_window`` are returned unchanged. A
    positive offset drops that many leading frames from ``seq_a``, a
    negative one drops ``|offset|`` leading frames from ``seq_b``.

    Aligning a sequence with itself returns it whole only when offset 0
    is the first strictly best score. Isolated motion bursts satisfy that;
    constant motion ties at every offset and growing motion favours
    positive offsets, so both get trimmed.

    Raises:
        InvalidArgumentError: If compare_window is negative
    """
    if compare_window < 0:
        raise InvalidArgumentError(f"compare_window must be non-negative, got {compare_window}")

    if len(seq_a) < compare_window or len(seq_b) < compare_window:
        logger.debug(
            "Skipping alignment: %d / %d frames, window %d",
            len(seq_a),
            len(seq_b),
            compare_window,
        )
        return seq_a, seq_b

    result = find_offset(seq_a, seq_b, compare_window)
    logger.debug("Best offset %d (score %s)", result.offset, result.score)

    if result.offset > 0:
        return seq_a.drop_leading(result.offset), seq_b
    if result.offset < 0:
        return seq_a, seq_b.drop_leading(-result.offset)
    return seq_a, seq_b
