"""Joint length calibration from observed frames."""

from __future__ import annotations

from mocap_engine.core.exceptions import EmptySequenceError
from mocap_engine.core.logging import get_logger
from mocap_engine.core.types import Frame, MotionSequence, Topology
from mocap_engine.processing.geometry import distance

logger = get_logger(__name__)


def calibrate_joint_lengths(topology: Topology, frame: Frame) -> Topology:
    """Set each joint's target length to its distance in ``frame``.

    Joints with an absent or invisible endpoint keep their current length.

    Args:
        topology: Joints to calibrate
        frame: Reference frame, usually a neutral pose

    Returns:
        New topology in the same order
    """
    joints = []
    calibrated = 0
    for joint in topology:
        start = frame.visible(joint.start_marker_id)
        end = frame.visible(joint.end_marker_id)
        if start is not None and end is not None:
            joint = joint.with_length(distance(start.position, end.position))
            calibrated += 1
        joints.append(joint)

    logger.info("Calibrated %d of %d joint lengths", calibrated, len(topology))
    return topology.with_joints(joints)


def calibrate_from_sequence(topology: Topology, sequence: MotionSequence) -> Topology:
    """Calibrate joint lengths from the first frame of a sequence.

    Raises:
        EmptySequenceError: If the sequence has no frames
    """
    if not sequence.frames:
        raise EmptySequenceError("Cannot calibrate joint lengths from an empty sequence")
    return calibrate_joint_lengths(topology, sequence.frames[0])
