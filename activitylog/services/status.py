"""
Enabled/disabled switch for activity logging.
"""

from typing import Optional

from . import config


class LogStatus:
    """
    Holds whether activity logging is enabled.

    Without an explicit initial value, ACTIVITYLOG['ENABLED'] is read on
    first use. Not thread-safe; give each concurrent task its own instance.
    """

    def __init__(self, enabled: Optional[bool] = None):
        self._enabled = None if enabled is None else bool(enabled)

    def enable(self) -> bool:
        self._enabled = True
        return self._enabled

    def disable(self) -> bool:
        self._enabled = False
        return self._enabled

    def enabled(self) -> bool:
        if self._enabled is None:
            self._enabled = config.is_enabled()
        return self._enabled

    def disabled(self) -> bool:
        return not self.enabled()

    def __repr__(self):
        return f"<LogStatus enabled={self._enabled}>"
