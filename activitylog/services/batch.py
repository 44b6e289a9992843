"""
Batch correlation for activities.

Every activity created while a batch is open is stamped with the same
batch UUID, so all entries written during one logical operation can be
fetched together with ``Activity.objects.for_batch(uuid)``.

Example:
    >>> from activitylog.services import activity, activity_batch
    >>> with activity_batch.batch() as batch_uuid:
    ...     activity().performed_on(order).log('order placed')
    ...     activity().performed_on(invoice).log('invoice created')
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class ActivityBatch:
    """
    Holds zero or one open batch UUID.

    Batches nest: inner start/end pairs reuse the outer UUID, which is
    cleared only when the outermost batch ends.
    """

    def __init__(self):
        self._uuid: Optional[uuid.UUID] = None
        self._depth = 0

    def start_batch(self) -> None:
        """Open a batch, or nest inside the one already open."""
        self._depth += 1
        if self._depth == 1:
            logger.debug("Activity batch started")

    def end_batch(self) -> None:
        """Close one nesting level; the UUID is dropped when none remain."""
        self._depth = max(0, self._depth - 1)
        if self._depth == 0:
            if self._uuid is not None:
                logger.debug(f"Activity batch {self._uuid} ended")
            self._uuid = None

    def is_open(self) -> bool:
        return self._depth > 0

    def get_uuid(self) -> Optional[uuid.UUID]:
        """
        Get the UUID of the open batch.

        Returns:
            The batch UUID, generated on first access within the batch,
            or None when no batch is open
        """
        if not self.is_open():
            return None
        if self._uuid is None:
            self._uuid = uuid.uuid4()
        return self._uuid

    def set_uuid(self, value: uuid.UUID) -> None:
        """Continue an existing batch (e.g. one started in another request)."""
        self._uuid = value
        self._depth = max(self._depth, 1)

    @contextmanager
    def batch(self):
        """Run the enclosed block inside a batch, yielding its UUID."""
        self.start_batch()
        try:
            yield self.get_uuid()
        finally:
            self.end_batch()

    def within_batch(self, callback: Callable[[uuid.UUID], Any]) -> Any:
        """
        Call ``callback(batch_uuid)`` inside a batch.

        Returns:
            Whatever the callback returns
        """
        with self.batch() as batch_uuid:
            return callback(batch_uuid)
