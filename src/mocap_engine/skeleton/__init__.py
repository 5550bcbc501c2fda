"""Marker catalogue, default topology, and joint-length calibration."""

from mocap_engine.skeleton.catalog import (
    BodySegment,
    MarkerIds,
    default_topology,
    marker_name,
    marker_segment,
)
from mocap_engine.skeleton.topology import calibrate_from_sequence, calibrate_joint_lengths

__all__ = [
    "MarkerIds",
    "BodySegment",
    "default_topology",
    "marker_name",
    "marker_segment",
    "calibrate_joint_lengths",
    "calibrate_from_sequence",
]
