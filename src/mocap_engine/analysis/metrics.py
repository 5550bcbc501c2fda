"""Trajectory, segment-length and velocity analysis of marker sequences.

This module is pure logic with NO I/O. All functions operate on typed
dataclasses and return results.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from mocap_engine.core.types import MotionSequence, Point, Topology
from mocap_engine.processing.geometry import distance

DEFAULT_FPS = 30.0


@dataclass
class Series:
    """Values sampled at a subset of frame indices."""

    frame_indices: list[int] = field(default_factory=list)
    values: list[float] = field(default_factory=list)

    def append(self, frame_index: int, value: float) -> None:
        self.frame_indices.append(frame_index)
        self.values.append(value)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class SeriesStats:
    """Summary statistics for a series."""

    mean: float
    std: float  # Population standard deviation
    min: float
    max: float


def marker_trajectory(sequence: MotionSequence, marker_id: str) -> list[Point | None]:
    """Position of a marker in every frame, None where it is not visible."""
    trajectory: list[Point | None] = []
    for frame in sequence:
        sample = frame.visible(marker_id)
        trajectory.append(sample.position if sample is not None else None)
    return trajectory


def joint_length_series(
    sequence: MotionSequence,
    topology: Topology,
    joint_indices: Iterable[int] | None = None,
) -> dict[str, Series]:
    """Measured segment length per frame for selected joints.

    Args:
        sequence: Frames to measure
        topology: Joint definitions
        joint_indices: Indices into the topology, or None for all joints

    Returns:
        Mapping of joint name to its length series. Frames where either
        endpoint is not visible are omitted from that joint's series.
    """
    indices = range(len(topology)) if joint_indices is None else list(joint_indices)
    joints = [topology[i] for i in indices]
    data = {joint.name: Series() for joint in joints}

    for frame_index, frame in enumerate(sequence):
        for joint in joints:
            start = frame.visible(joint.start_marker_id)
            end = frame.visible(joint.end_marker_id)
            if start is not None and end is not None:
                data[joint.name].append(frame_index, distance(start.position, end.position))

    return data


def marker_velocity_series(
    sequence: MotionSequence,
    marker_ids: Iterable[str],
) -> dict[str, Series]:
    """Frame-to-frame speed of selected markers.

    Speed is displacement between consecutive visible samples times the
    sequence frame rate (30 fps when the sequence reports none).

    Returns:
        Mapping of marker id to a series indexed by the later frame
    """
    fps = sequence.fps or DEFAULT_FPS
    ids = list(marker_ids)
    data = {marker_id: Series() for marker_id in ids}

    frames = sequence.frames
    for i in range(1, len(frames)):
        for marker_id in ids:
            previous = frames[i - 1].visible(marker_id)
            current = frames[i].visible(marker_id)
            if previous is not None and current is not None:
                data[marker_id].append(i, distance(previous.position, current.position) * fps)

    return data


def summarize(values: Iterable[float]) -> SeriesStats | None:
    """Mean, standard deviation, min and max of a series.

    Returns:
        SeriesStats, or None for an empty series
    """
    array = np.asarray(list(values), dtype=np.float64)
    if array.size == 0:
        return None

    return SeriesStats(
        mean=float(array.mean()),
        std=float(array.std()),
        min=float(array.min()),
        max=float(array.max()),
    )


def length_consistency(series: Series) -> dict[str, float | None]:
    """How stable a segment length is across frames.

    Args:
        series: Length series of one joint

    Returns:
        Dictionary with coefficient of variation (percent), range and
        interquartile range
    """
    if len(series) < 2:
        return {
            "coefficient_of_variation": None,
            "range": None,
            "interquartile_range": None,
        }

    lengths = np.asarray(series.values, dtype=np.float64)
    mean = float(lengths.mean())
    std = float(lengths.std())
    q25, q75 = np.percentile(lengths, [25, 75])

    return {
        "coefficient_of_variation": (std / mean * 100) if mean > 0 else None,
        "range": float(lengths.max() - lengths.min()),
        "interquartile_range": float(q75 - q25),
    }
