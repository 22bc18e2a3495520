"""Exception hierarchy for the fare pipeline."""

from typing import Any


class FareError(Exception):
    """Base exception for all fare pipeline errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PermanentError(FareError):
    """Errors that will not go away by recomputing."""

    pass


class CalculationError(PermanentError):
    """A strategy could not produce a fare from its inputs."""

    pass
