"""Core infrastructure: config, types, exceptions, and logging."""

from mocap_engine.core.config import Settings, get_settings
from mocap_engine.core.exceptions import (
    EmptySequenceError,
    InvalidArgumentError,
    MocapEngineError,
)
from mocap_engine.core.logging import get_logger, setup_logging
from mocap_engine.core.types import (
    Frame,
    Joint,
    MarkerId,
    MarkerSample,
    MotionSequence,
    Point,
    Topology,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "Point",
    "MarkerId",
    "MarkerSample",
    "Frame",
    "Joint",
    "Topology",
    "MotionSequence",
    # Exceptions
    "MocapEngineError",
    "InvalidArgumentError",
    "EmptySequenceError",
    # Logging
    "setup_logging",
    "get_logger",
]
