"""Iterative length-constraint relaxation.

Nudges visible marker positions toward the target segment lengths of a
topology. This is an approximate position-based relaxation, not an exact
solver: each pass locally corrects one joint at a time, and repeated
passes propagate the corrections through chains of joints.
"""

from __future__ import annotations

from dataclasses import dataclass

from mocap_engine.core.exceptions import InvalidArgumentError
from mocap_engine.core.logging import get_logger
from mocap_engine.core.types import Frame, MarkerId, Point, Topology
from mocap_engine.processing.geometry import displacement, distance

logger = get_logger(__name__)

DEFAULT_ITERATIONS = 5


@dataclass
class _Node:
    """Working state for one visible marker during relaxation."""

    position: Point
    stiffness: float


def solve(frame: Frame, topology: Topology, iterations: int = DEFAULT_ITERATIONS) -> Frame:
    """Relax marker positions toward the topology's segment lengths.

    Args:
        frame: Input frame (not modified)
        topology: Ordered joints; only joints with length > 0 whose
            endpoints are both visible take part
        iterations: Number of full passes over the joint list

    Returns:
        New frame with relaxed positions for constrained visible markers.
        Confidence, visibility and all other markers pass through.

    Raises:
        InvalidArgumentError: If iterations is negative
    """
    if iterations < 0:
        raise InvalidArgumentError(f"iterations must be non-negative, got {iterations}")

    nodes = {
        marker_id: _Node(position=sample.position, stiffness=sample.confidence)
        for marker_id, sample in frame.markers.items()
        if sample.is_visible
    }
    edges = [
        joint
        for joint in topology.constrained()
        if joint.start_marker_id in nodes and joint.end_marker_id in nodes
    ]

    if iterations == 0 or not edges:
        return frame.with_markers(frame.markers)

    for _ in range(iterations):
        for joint in edges:
            start = nodes[joint.start_marker_id]
            end = nodes[joint.end_marker_id]
            _relax(start, end, joint.length)

    touched: set[MarkerId] = set()
    for joint in edges:
        touched.add(joint.start_marker_id)
        touched.add(joint.end_marker_id)

    markers = dict(frame.markers)
    for marker_id in touched:
        markers[marker_id] = markers[marker_id].with_position(nodes[marker_id].position)

    logger.debug(
        "Relaxed %d markers over %d joints (%d iterations)",
        len(touched),
        len(edges),
        iterations,
    )
    return frame.with_markers(markers)


def _relax(start: _Node, end: _Node, target_length: float) -> None:
    """Move both endpoints of one joint toward its target length.

    The endpoint with lower stiffness takes the larger share of the
    correction.
    """
    current = distance(start.position, end.position)
    if current == 0:
        return

    correction = (target_length - current) / current
    delta = displacement(start.position, end.position)

    total = start.stiffness + end.stiffness
    if total == 0:
        start_share = end_share = 0.5
    else:
        start_share = end.stiffness / total
        end_share = start.stiffness / total

    start.position = start.position - delta * (correction * start_share * 0.5)
    end.position = end.position + delta * (correction * end_share * 0.5)
