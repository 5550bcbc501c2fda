"""One-pass geometric estimation of markers missing from a frame."""

from __future__ import annotations

from mocap_engine.core.logging import get_logger
from mocap_engine.core.types import Frame, Joint, MarkerId, MarkerSample, Point, Topology
from mocap_engine.processing.geometry import unit_vector

logger = get_logger(__name__)

ESTIMATED_CONFIDENCE = 0.5


def fill_missing(frame: Frame, topology: Topology) -> Frame:
    """Synthesize positions for markers that are absent or invisible.

    For every constrained joint with exactly one visible endpoint, the first
    other constrained joint (in topology order) touching that endpoint
    provides an anchor marker. The missing marker is placed at the joint's
    target length from the visible endpoint, in the direction of the anchor.

    Lookups always read the input frame, so markers synthesized here are
    never used as anchors in the same call. Call again for multi-hop fills.

    Args:
        frame: Input frame (not modified)
        topology: Ordered joints

    Returns:
        New frame with estimated markers added (confidence 0.5, visible)
    """
    markers = dict(frame.markers)
    joints = topology.joints
    estimated: list[MarkerId] = []

    for index, joint in enumerate(joints):
        if not joint.is_constrained:
            continue

        start = frame.visible(joint.start_marker_id)
        end = frame.visible(joint.end_marker_id)
        if start is not None and end is None:
            known_id, missing_id, known = joint.start_marker_id, joint.end_marker_id, start
        elif end is not None and start is None:
            known_id, missing_id, known = joint.end_marker_id, joint.start_marker_id, end
        else:
            continue

        position = _estimate(frame, joints, index, known_id, known.position)
        if position is None:
            continue

        markers[missing_id] = MarkerSample(
            position=position,
            confidence=ESTIMATED_CONFIDENCE,
            is_visible=True,
        )
        estimated.append(missing_id)

    if estimated:
        logger.debug("Estimated %d missing markers: %s", len(estimated), ", ".join(estimated))
    return frame.with_markers(markers)


def _estimate(
    frame: Frame,
    joints: tuple[Joint, ...],
    index: int,
    known_id: MarkerId,
    known: Point,
) -> Point | None:
    anchor_joint = next(
        (
            other
            for i, other in enumerate(joints)
            if i != index and other.is_constrained and other.touches(known_id)
        ),
        None,
    )
    if anchor_joint is None:
        return None

    anchor = frame.visible(anchor_joint.other_end(known_id))
    if anchor is None:
        return None

    direction = unit_vector(known, anchor.position)
    if direction is None:
        return None

    return known + direction * joints[index].length
