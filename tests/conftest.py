"""Pytest fixtures for mocap_engine tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from mocap_engine.core.config import (
    FusionSettings,
    Settings,
    SmoothingSettings,
    SolverSettings,
    SyncSettings,
)
from mocap_engine.core.types import Frame, Joint, MarkerSample, MotionSequence, Point, Topology

# marker id -> (x, y) or (x, y, confidence) or (x, y, confidence, is_visible)
MarkerValues = dict[str, tuple]
FrameFactory = Callable[..., Frame]
SequenceFactory = Callable[..., MotionSequence]


def _sample(values: tuple) -> MarkerSample:
    x, y, *rest = values
    confidence = rest[0] if len(rest) > 0 else 1.0
    visible = rest[1] if len(rest) > 1 else True
    return MarkerSample(position=Point(x, y), confidence=confidence, is_visible=visible)


def _frame(markers: MarkerValues, frame_number: int = 0, fps: float = 30.0) -> Frame:
    return Frame(
        markers={marker_id: _sample(values) for marker_id, values in markers.items()},
        frame_number=frame_number,
        timestamp=frame_number / fps,
    )


@pytest.fixture
def make_frame() -> FrameFactory:
    """Factory building a frame from compact marker tuples."""
    return _frame


@pytest.fixture
def make_sequence() -> SequenceFactory:
    """Factory building a 30 fps sequence from per-frame marker dicts."""

    def build(marker_lists: list[MarkerValues], fps: float = 30.0) -> MotionSequence:
        frames = [_frame(values, i, fps) for i, values in enumerate(marker_lists)]
        return MotionSequence.from_frames(frames, fps=fps)

    return build


@pytest.fixture
def make_step_sequence() -> Callable[[int, int], MotionSequence]:
    """Factory for a sequence whose only motion is a single step.

    Marker "A" sits at x=0 up to frame ``step_at`` and at x=10 afterwards,
    so the motion signal is 10 at index ``step_at`` and 0 elsewhere.
    """

    def build(length: int, step_at: int) -> MotionSequence:
        frames = [
            _frame({"A": (0.0 if i <= step_at else 10.0, 0.0)}, i)
            for i in range(length)
        ]
        return MotionSequence.from_frames(frames, fps=30.0)

    return build


@pytest.fixture
def two_marker_frame() -> Frame:
    """A at the origin, B at (3, 4): distance 5."""
    return _frame({"A": (0.0, 0.0), "B": (3.0, 4.0)})


@pytest.fixture
def single_joint_topology() -> Topology:
    """One A-B joint of length 10."""
    return Topology([Joint("A", "B", 10.0, "A to B")])


@pytest.fixture
def chain_topology() -> Topology:
    """A-B-C chain with both segments of length 2."""
    return Topology(
        [
            Joint("A", "B", 2.0, "Upper"),
            Joint("B", "C", 2.0, "Lower"),
        ]
    )


@pytest.fixture
def test_settings() -> Settings:
    """Settings with small, explicit parameters."""
    return Settings(
        solver=SolverSettings(iterations=5),
        smoothing=SmoothingSettings(window_size=3),
        fusion=FusionSettings(blend_ratio=0.5),
        sync=SyncSettings(compare_window=10),
    )
