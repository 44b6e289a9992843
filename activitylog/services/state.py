"""
Process-wide status, batch and causer resolver shared by loggers built
with ``activity()``.

Suitable for single-threaded use; concurrent tasks should construct their
own LogStatus/ActivityBatch/CauserResolver and pass them to ActivityLogger.
"""

from .batch import ActivityBatch
from .causer import CauserResolver
from .status import LogStatus

log_status = LogStatus()
activity_batch = ActivityBatch()
causer_resolver = CauserResolver()
