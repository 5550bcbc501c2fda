"""Sequence processing pipeline orchestration."""

from mocap_engine.pipeline.processor import ProcessedSequence, SequenceProcessor

__all__ = ["SequenceProcessor", "ProcessedSequence"]
