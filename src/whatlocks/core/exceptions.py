"""Custom exceptions for whatlocks."""

from pathlib import Path


class InvalidDurationError(ValueError):
    """Raised when a lock duration cannot be rendered."""

    def __init__(self, duration: int):
        super().__init__(f"Duration must be a non-negative number of seconds, got: {duration}")
        self.duration = duration


class ReferenceDataError(Exception):
    """Reference data file is missing or malformed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid reference data '{path}': {reason}")
        self.path = path
        self.reason = reason
