"""
Activity log exceptions for consistent error handling.

Design principles:
- Resolution failures surface to the caller of the logging chain
- Nothing is persisted when an exception is raised mid-chain
- Storage errors are never wrapped; they propagate as raised by Django
"""


class ActivityLogError(Exception):
    """Base exception for all activity log errors."""
    pass


class CouldNotLogActivity(ActivityLogError):
    """
    Raised when an activity cannot be recorded.

    Example:
        The resolver override callback returned something that is not a model.
    """

    @classmethod
    def could_not_determine_user(cls, value):
        """Build the error raised when no causer can be derived from ``value``."""
        return CouldNotDetermineCauser(value)


class CouldNotDetermineCauser(CouldNotLogActivity):
    """
    Raised when causer resolution yields no usable identity.

    Attributes:
        value: The offending value (override result or raw id)
    """

    def __init__(self, value):
        super().__init__(f"Could not determine a user with identifier `{value}`.")
        self.value = value


class InvalidArgument(ActivityLogError, ValueError):
    """
    Raised for malformed inputs to the logger or resolver configuration.

    Example:
        Passing a plain dict to performed_on() instead of a saved model.
    """
    pass
