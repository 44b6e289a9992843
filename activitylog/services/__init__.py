"""
Activity Log Services

Provides the activity() entry point and the logging building blocks.
"""

from typing import Optional

from .batch import ActivityBatch
from .causer import CauserResolver
from .exceptions import (
    ActivityLogError,
    CouldNotDetermineCauser,
    CouldNotLogActivity,
    InvalidArgument,
)
from .logger import ActivityLogger
from .options import ActivityLogOptions
from .state import activity_batch, causer_resolver, log_status
from .status import LogStatus


def activity(log_name: Optional[str] = None) -> ActivityLogger:
    """
    Get a new logger wired to the shared status, batch and causer resolver.

    Args:
        log_name: Optional log name for the entry

    Example:
        >>> activity('orders').performed_on(order).log('Order :subject.number placed')
    """
    activity_logger = ActivityLogger(
        log_status=log_status,
        batch=activity_batch,
        causer_resolver=causer_resolver,
    )
    if log_name:
        activity_logger.use_log(log_name)
    return activity_logger


__all__ = [
    'activity',
    'ActivityBatch',
    'ActivityLogError',
    'ActivityLogger',
    'ActivityLogOptions',
    'CauserResolver',
    'CouldNotDetermineCauser',
    'CouldNotLogActivity',
    'InvalidArgument',
    'LogStatus',
    'activity_batch',
    'causer_resolver',
    'log_status',
]
