"""Exceptions raised by the training load engine."""


class LoadComputationError(Exception):
    """Base class for training load errors."""


class InvalidDateRangeError(LoadComputationError, ValueError):
    """Raised when a series end date precedes its start date."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"End date {end} is before mesocycle start {start}")


class EmptyHistoryError(LoadComputationError, ValueError):
    """Raised when a projection has no historical score to seed from."""
