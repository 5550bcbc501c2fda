"""Sequence processing pipeline orchestration."""

from __future__ import annotations

from dataclasses import dataclass, field

from mocap_engine.core.config import Settings, get_settings
from mocap_engine.core.logging import get_logger, setup_logging
from mocap_engine.core.types import MotionSequence, Topology
from mocap_engine.processing.estimator import fill_missing as fill_missing_markers
from mocap_engine.processing.filters import smooth as smooth_sequence
from mocap_engine.processing.fusion import fuse_sequences
from mocap_engine.processing.solver import solve
from mocap_engine.processing.sync import align
from mocap_engine.skeleton.topology import calibrate_from_sequence

logger = get_logger(__name__)


@dataclass
class ProcessedSequence:
    """Result of running a sequence through the pipeline."""

    sequence: MotionSequence
    stages: list[str] = field(default_factory=list)
    offset: int = 0  # Frames trimmed by alignment; positive = primary trimmed


class SequenceProcessor:
    """Runs the processing stages over whole sequences.

    Coordinates:
    - Missing-marker estimation
    - Temporal smoothing
    - Length-constraint solving
    - Source alignment and fusion

    The processor only holds configuration. Every call recomputes from the
    sequences passed in, so owners re-run it whenever their options change.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize processor with settings.

        Args:
            settings: Engine settings (uses cached defaults if None)
        """
        self.settings = settings or get_settings()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SequenceProcessor:
        """Build a processor and configure engine logging from the same settings.

        Args:
            settings: Engine settings (uses cached defaults if None)
        """
        settings = settings or get_settings()
        setup_logging(settings.logging)
        logger.debug(
            "Processor settings: iterations=%d window=%d blend=%.2f compare_window=%d",
            settings.solver.iterations,
            settings.smoothing.window_size,
            settings.fusion.blend_ratio,
            settings.sync.compare_window,
        )
        return cls(settings)

    def calibrate(self, topology: Topology, sequence: MotionSequence) -> Topology:
        """Derive joint target lengths from the first frame of a sequence."""
        return calibrate_from_sequence(topology, sequence)

    def process(
        self,
        sequence: MotionSequence,
        topology: Topology,
        *,
        fill_missing: bool = True,
        smooth: bool = True,
        constrain: bool = True,
    ) -> ProcessedSequence:
        """Repair and stabilize a single-source sequence.

        Args:
            sequence: Raw input sequence
            topology: Calibrated joints
            fill_missing: Estimate markers missing from each frame
            smooth: Apply temporal smoothing
            constrain: Relax each frame toward the joint lengths

        Returns:
            ProcessedSequence with the stages that ran, in order
        """
        result = ProcessedSequence(sequence=sequence)

        # Step 1: Fill gaps
        if fill_missing:
            result.sequence = result.sequence.with_frames(
                fill_missing_markers(frame, topology) for frame in result.sequence
            )
            result.stages.append("fill_missing")

        # Step 2: Temporal smoothing
        if smooth:
            result.sequence = smooth_sequence(
                result.sequence, self.settings.smoothing.window_size
            )
            result.stages.append("smooth")

        # Step 3: Segment length constraints
        if constrain:
            iterations = self.settings.solver.iterations
            result.sequence = result.sequence.with_frames(
                solve(frame, topology, iterations) for frame in result.sequence
            )
            result.stages.append("constrain")

        logger.info(
            "Processed %d frames (%s)",
            len(result.sequence),
            ", ".join(result.stages) or "no stages",
        )
        return result

    def combine(self, primary: MotionSequence, secondary: MotionSequence) -> ProcessedSequence:
        """Align two capture sources in time and fuse them.

        Args:
            primary: Marker-based sequence; its key set is kept
            secondary: Markerless sequence blended in

        Returns:
            ProcessedSequence holding the fused sequence and the applied offset
        """
        aligned_primary, aligned_secondary = align(
            primary, secondary, self.settings.sync.compare_window
        )
        if len(aligned_primary) < len(primary):
            offset = len(primary) - len(aligned_primary)
        else:
            offset = -(len(secondary) - len(aligned_secondary))

        fused = fuse_sequences(
            aligned_primary, aligned_secondary, self.settings.fusion.blend_ratio
        )
        logger.info("Fused %d frames (offset %d)", len(fused), offset)
        return ProcessedSequence(sequence=fused, stages=["align", "fuse"], offset=offset)
