"""Custom exceptions for the motion-capture processing engine."""


class MocapEngineError(Exception):
    """Base exception for all mocap_engine errors."""

    pass


class InvalidArgumentError(MocapEngineError, ValueError):
    """A structural argument violates an operation's contract."""

    def __init__(self, message: str = "Invalid argument") -> None:
        self.message = message
        super().__init__(self.message)


class EmptySequenceError(MocapEngineError):
    """Operation requires at least one frame but the sequence is empty."""

    def __init__(self, message: str = "Sequence contains no frames") -> None:
        self.message = message
        super().__init__(self.message)
