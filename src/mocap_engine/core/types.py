"""Core data types and structures.

All types are immutable value objects. Transforms never modify them in
place; they build new instances instead.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType

from mocap_engine.core.exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D position in capture coordinates."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def norm(self) -> float:
        """Length of the point interpreted as a vector from the origin."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)


class MarkerId(str):
    """Validated marker identifier.

    Identifiers must be non-empty printable ASCII without surrounding
    whitespace. Instances compare and hash like the plain string.
    """

    __slots__ = ()

    def __new__(cls, value: str) -> MarkerId:
        if isinstance(value, MarkerId):
            return value
        if isinstance(value, Enum):
            value = value.value
        if (
            not isinstance(value, str)
            or not value
            or value != value.strip()
            or not value.isascii()
            or not value.isprintable()
        ):
            raise InvalidArgumentError(f"Invalid marker id: {value!r}")
        return super().__new__(cls, value)


@dataclass(frozen=True, slots=True)
class MarkerSample:
    """One marker observation in one frame.

    Attributes:
        position: Observed 2D position
        confidence: Reliability of the observation, conventionally [0, 1]
        is_visible: False means the position must not be used as data
    """

    position: Point
    confidence: float = 1.0
    is_visible: bool = True

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def with_position(self, position: Point) -> MarkerSample:
        """Copy of this sample at a new position."""
        return replace(self, position=position)


@dataclass(frozen=True, slots=True)
class Frame:
    """Snapshot of all observed markers at one instant.

    Attributes:
        markers: Read-only mapping of marker id to sample. A missing key
            means the marker is absent from the frame.
        frame_number: Frame sequence number
        timestamp: Frame timestamp in seconds
    """

    markers: Mapping[MarkerId, MarkerSample] = field(default_factory=dict)
    frame_number: int = 0
    timestamp: float = 0.0

    def __post_init__(self) -> None:
        normalized = {MarkerId(key): sample for key, sample in self.markers.items()}
        object.__setattr__(self, "markers", MappingProxyType(normalized))

    def __hash__(self) -> int:
        return hash((frozenset(self.markers.items()), self.frame_number, self.timestamp))

    def __len__(self) -> int:
        return len(self.markers)

    def __contains__(self, marker_id: object) -> bool:
        return marker_id in self.markers

    def get(self, marker_id: str) -> MarkerSample | None:
        """Sample for a marker, or None when absent."""
        return self.markers.get(marker_id)

    def visible(self, marker_id: str) -> MarkerSample | None:
        """Sample for a marker only if it is present and visible."""
        sample = self.markers.get(marker_id)
        if sample is None or not sample.is_visible:
            return None
        return sample

    def visible_ids(self) -> list[MarkerId]:
        """Ids of all visible markers."""
        return [marker_id for marker_id, s in self.markers.items() if s.is_visible]

    def with_markers(self, markers: Mapping[str, MarkerSample]) -> Frame:
        """New frame with the same number and timestamp but other markers."""
        return Frame(
            markers=markers,
            frame_number=self.frame_number,
            timestamp=self.timestamp,
        )


@dataclass(frozen=True, slots=True)
class Joint:
    """A length-constrained edge between two markers.

    A length of 0 (or less) means the joint is unconstrained.
    """

    start_marker_id: MarkerId
    end_marker_id: MarkerId
    length: float = 0.0
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_marker_id", MarkerId(self.start_marker_id))
        object.__setattr__(self, "end_marker_id", MarkerId(self.end_marker_id))

    @property
    def is_constrained(self) -> bool:
        return self.length > 0

    def touches(self, marker_id: str) -> bool:
        """Check whether either endpoint is the given marker."""
        return marker_id in (self.start_marker_id, self.end_marker_id)

    def other_end(self, marker_id: str) -> MarkerId:
        """Endpoint opposite to ``marker_id``."""
        if marker_id == self.start_marker_id:
            return self.end_marker_id
        return self.start_marker_id

    def with_length(self, length: float) -> Joint:
        return replace(self, length=length)


@dataclass(frozen=True, slots=True)
class Topology:
    """Ordered joint list describing which marker pairs are constrained.

    Order is significant: the solver relaxes joints in this order and the
    missing-marker estimator picks anchors by it.
    """

    joints: tuple[Joint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "joints", tuple(self.joints))

    def __iter__(self) -> Iterator[Joint]:
        return iter(self.joints)

    def __len__(self) -> int:
        return len(self.joints)

    def __getitem__(self, index: int) -> Joint:
        return self.joints[index]

    def constrained(self) -> Iterator[Joint]:
        """Joints with a positive target length, in topology order."""
        return (joint for joint in self.joints if joint.is_constrained)

    def marker_ids(self) -> set[MarkerId]:
        """All marker ids referenced by any joint."""
        ids: set[MarkerId] = set()
        for joint in self.joints:
            ids.add(joint.start_marker_id)
            ids.add(joint.end_marker_id)
        return ids

    def with_joints(self, joints: Iterable[Joint]) -> Topology:
        return Topology(tuple(joints))


@dataclass(frozen=True, slots=True)
class MotionSequence:
    """Ordered frames from one capture source plus timing metadata.

    Attributes:
        frames: Frames in capture order
        fps: Nominal frame rate
        duration: Duration in seconds
        start_time: Timestamp of the first frame in seconds
        end_time: Timestamp of the last frame in seconds
    """

    frames: tuple[Frame, ...] = ()
    fps: float = 0.0
    duration: float = 0.0
    start_time: float = 0.0
    end_time: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "frames", tuple(self.frames))

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def __getitem__(self, index: int) -> Frame:
        return self.frames[index]

    @classmethod
    def from_frames(cls, frames: Iterable[Frame], fps: float = 0.0) -> MotionSequence:
        """Build a sequence whose timing is taken from frame timestamps."""
        frames = tuple(frames)
        if not frames:
            return cls(frames=frames, fps=fps)

        start = frames[0].timestamp
        end = frames[-1].timestamp
        return cls(frames=frames, fps=fps, duration=end - start, start_time=start, end_time=end)

    def with_frames(self, frames: Iterable[Frame]) -> MotionSequence:
        """Same metadata, different frames."""
        return replace(self, frames=tuple(frames))

    def drop_leading(self, count: int) -> MotionSequence:
        """Drop ``count`` leading frames, moving start_time accordingly."""
        if count <= 0:
            return self

        remaining = self.frames[count:]
        start = remaining[0].timestamp if remaining else self.end_time
        return replace(
            self,
            frames=remaining,
            start_time=start,
            duration=max(0.0, self.end_time - start),
        )
