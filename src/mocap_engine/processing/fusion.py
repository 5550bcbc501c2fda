"""Confidence-weighted fusion of two time-aligned capture sources."""

from __future__ import annotations

from mocap_engine.core.logging import get_logger
from mocap_engine.core.types import Frame, MarkerId, MarkerSample, MotionSequence, Point

logger = get_logger(__name__)


def fuse(primary: Frame, secondary: Frame, blend_ratio: float = 0.5) -> Frame:
    """Blend two frames of the same instant from different sources.

    Args:
        primary: Frame whose key set, frame number and timestamp are kept
            (typically marker-based capture)
        secondary: Frame blended in (typically markerless capture)
        blend_ratio: 0 keeps the primary, 1 prefers the secondary. Values
            outside [0, 1] are extrapolated, not clamped.

    Returns:
        New frame with blended positions where both sources are visible
    """
    if not 0.0 <= blend_ratio <= 1.0:
        logger.warning("blend_ratio %.3f outside [0, 1]; extrapolating", blend_ratio)

    markers: dict[MarkerId, MarkerSample] = dict(primary.markers)
    for marker_id, sample in primary.markers.items():
        other = secondary.visible(marker_id)
        if other is None or not sample.is_visible:
            continue

        primary_weight = sample.confidence * (1.0 - blend_ratio)
        secondary_weight = other.confidence * blend_ratio
        total = primary_weight + secondary_weight
        if total == 0:
            continue

        t = secondary_weight / total
        p, s = sample.position, other.position
        markers[marker_id] = MarkerSample(
            position=Point(p.x + (s.x - p.x) * t, p.y + (s.y - p.y) * t),
            confidence=max(sample.confidence, other.confidence),
            is_visible=sample.is_visible,
        )

    return primary.with_markers(markers)


def fuse_sequences(
    primary: MotionSequence,
    secondary: MotionSequence,
    blend_ratio: float = 0.5,
) -> MotionSequence:
    """Fuse two aligned sequences frame by frame.

    Only the common prefix is fused; the result keeps the primary's
    metadata and is as long as the shorter input.
    """
    count = min(len(primary), len(secondary))
    if count < len(primary):
        logger.debug("Fusing %d of %d primary frames", count, len(primary))

    fused = [fuse(p, s, blend_ratio) for p, s in zip(primary, secondary)]
    if count == len(primary):
        return primary.with_frames(fused)
    return MotionSequence.from_frames(fused, fps=primary.fps)
