"""Repair, stabilization and alignment of 2D motion-capture marker data."""

from mocap_engine.core.types import (
    Frame,
    Joint,
    MarkerId,
    MarkerSample,
    MotionSequence,
    Point,
    Topology,
)
from mocap_engine.processing import align, fill_missing, fuse, smooth, solve

__version__ = "0.1.0"

__all__ = [
    "Point",
    "MarkerId",
    "MarkerSample",
    "Frame",
    "Joint",
    "Topology",
    "MotionSequence",
    "solve",
    "fill_missing",
    "smooth",
    "fuse",
    "align",
]
