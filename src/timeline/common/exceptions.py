"""Exceptions raised across the timeline project."""


class TimelineError(Exception):
    """Base class for timeline errors."""


class ValidationFault(TimelineError):
    """The client sent a request that breaks the input contract."""


class StorageFault(TimelineError):
    """The database failed to complete an operation."""
