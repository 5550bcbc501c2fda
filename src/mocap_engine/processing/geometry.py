"""Distance and vector operations on 2D points."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from mocap_engine.core.types import Point


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def displacement(start: Point, end: Point) -> Point:
    """Vector pointing from ``start`` to ``end``."""
    return Point(end.x - start.x, end.y - start.y)


def unit_vector(start: Point, end: Point) -> Point | None:
    """Unit vector from ``start`` towards ``end``.

    Returns:
        Normalized direction, or None if the points coincide
    """
    delta = displacement(start, end)
    magnitude = delta.norm()
    if magnitude == 0:
        return None
    return Point(delta.x / magnitude, delta.y / magnitude)


def weighted_mean(
    points: Sequence[Point], weights: Sequence[float] | NDArray[np.floating[Any]]
) -> Point | None:
    """Weighted average position.

    Args:
        points: Positions to average
        weights: One non-negative weight per position

    Returns:
        sum(p * w) / sum(w), or None when there are no points or the
        weights sum to zero
    """
    if not points:
        return None

    w = np.asarray(weights, dtype=np.float64)
    total = float(w.sum())
    if total == 0:
        return None

    coords = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    mean = (coords * w[:, None]).sum(axis=0) / total
    return Point(float(mean[0]), float(mean[1]))
