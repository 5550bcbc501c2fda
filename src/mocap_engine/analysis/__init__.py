"""Pure analysis logic: trajectories, segment lengths, and velocities.

This module contains NO I/O operations.
"""

from mocap_engine.analysis.metrics import (
    Series,
    SeriesStats,
    joint_length_series,
    length_consistency,
    marker_trajectory,
    marker_velocity_series,
    summarize,
)

__all__ = [
    "Series",
    "SeriesStats",
    "marker_trajectory",
    "joint_length_series",
    "marker_velocity_series",
    "summarize",
    "length_consistency",
]
