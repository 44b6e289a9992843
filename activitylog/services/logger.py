"""
Activity Logger

Fluent builder that records one activity at a time.

Each configuration call works on a pending activity, created on first
use with the default log name, empty properties, the current causer and
the open batch UUID. ``log()`` resolves placeholders in the description,
saves the activity and starts over with no pending activity.

Placeholders:
    Descriptions may reference the activity's subject, causer and
    properties with ``:root.path`` tokens, e.g.

        "Updated :subject.name by :causer.email"
        "Price changed to :properties.attributes.price"

    Tokens with an unknown root, a missing attribute or a missing path
    are left as written.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, Callable, Optional

from django.db import models

from . import config, state
from .batch import ActivityBatch
from .causer import CauserResolver
from .exceptions import InvalidArgument
from .serialization import get_by_path, to_mapping
from .status import LogStatus

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r':[a-z0-9._-]+', re.IGNORECASE)
PLACEHOLDER_ROOTS = ('subject', 'causer', 'properties')

_MISSING = object()


class ActivityLogger:
    """
    Builder for activity log entries.

    Not reentrant: one pending activity per instance.

    Example:
        >>> from activitylog.services import activity
        >>>
        >>> activity() \\
        ...     .performed_on(article) \\
        ...     .caused_by(request.user) \\
        ...     .with_properties({'attributes': {'name': 'Acme'}}) \\
        ...     .set_event('updated') \\
        ...     .log('Updated :subject.name')
        >>>
        >>> # Nothing is written inside without_logs()
        >>> activity().without_logs(lambda: importer.run())
    """

    def __init__(
        self,
        log_status: Optional[LogStatus] = None,
        batch: Optional[ActivityBatch] = None,
        causer_resolver: Optional[CauserResolver] = None,
        default_log_name: Optional[str] = None,
    ):
        """
        Initialize the logger.

        Args:
            log_status: Enabled switch; defaults to the shared instance
            batch: Batch holder; defaults to the shared instance
            causer_resolver: Resolver; defaults to the shared instance
            default_log_name: Log name for new entries; defaults to
                              ACTIVITYLOG['DEFAULT_LOG_NAME']
        """
        self._log_status = log_status if log_status is not None else state.log_status
        self._batch = batch if batch is not None else state.activity_batch
        self._causer_resolver = causer_resolver if causer_resolver is not None else state.causer_resolver
        self._default_log_name = default_log_name
        self._activity = None

    @property
    def log_status(self) -> LogStatus:
        return self._log_status

    @property
    def causer_resolver(self) -> CauserResolver:
        return self._causer_resolver

    def set_log_status(self, log_status: LogStatus) -> 'ActivityLogger':
        self._log_status = log_status
        return self

    def performed_on(self, model: models.Model) -> 'ActivityLogger':
        """Set the subject: the entity the activity concerns."""
        self._require_saved_model(model, 'Subject')
        self._get_activity().subject = model
        return self

    def on(self, model: models.Model) -> 'ActivityLogger':
        return self.performed_on(model)

    def caused_by(self, model_or_id: Any) -> 'ActivityLogger':
        """
        Set the causer from a model instance or a raw id.

        None leaves the causer as it is.

        Raises:
            CouldNotDetermineCauser: If the causer cannot be resolved
        """
        if model_or_id is None:
            return self

        causer = self._causer_resolver.resolve(model_or_id)
        self._set_causer(self._get_activity(), causer)
        return self

    def by(self, model_or_id: Any) -> 'ActivityLogger':
        return self.caused_by(model_or_id)

    def caused_by_anonymous(self) -> 'ActivityLogger':
        """Record explicitly that there is no causer."""
        self._get_activity().causer = None
        return self

    def by_anonymous(self) -> 'ActivityLogger':
        return self.caused_by_anonymous()

    def set_event(self, event: str) -> 'ActivityLogger':
        self._get_activity().event = event
        return self

    def event(self, event: str) -> 'ActivityLogger':
        return self.set_event(event)

    def with_properties(self, properties: Optional[Mapping[str, Any]]) -> 'ActivityLogger':
        """Replace all properties."""
        if properties is not None and not isinstance(properties, Mapping):
            raise InvalidArgument(f"Properties must be a mapping, got {type(properties).__name__}")
        self._get_activity().properties = dict(properties or {})
        return self

    def with_property(self, key: str, value: Any) -> 'ActivityLogger':
        """Add or overwrite a single property."""
        activity = self._get_activity()
        properties = dict(activity.properties or {})
        properties[key] = value
        activity.properties = properties
        return self

    def created_at(self, created_at) -> 'ActivityLogger':
        self._get_activity().created_at = created_at
        return self

    def use_log(self, log_name: str) -> 'ActivityLogger':
        self._get_activity().log_name = log_name
        return self

    def in_log(self, log_name: str) -> 'ActivityLogger':
        return self.use_log(log_name)

    def tap(self, callback: Callable[[Any, Optional[str]], Any], event_name: Optional[str] = None) -> 'ActivityLogger':
        """Call ``callback(activity, event_name)`` to customize the pending activity."""
        callback(self._get_activity(), event_name)
        return self

    def enable_logging(self) -> 'ActivityLogger':
        self._log_status.enable()
        return self

    def disable_logging(self) -> 'ActivityLogger':
        self._log_status.disable()
        return self

    def log(self, description: str = ''):
        """
        Save the pending activity.

        Args:
            description: Used when the activity has no description yet;
                         placeholders are resolved in either case

        Returns:
            The saved Activity, or None when logging is disabled

        Raises:
            Any error raised by the database while saving
        """
        if self._log_status.disabled():
            logger.debug("Activity logging is disabled, entry not recorded")
            return None

        activity = self._get_activity()
        activity.description = self.replace_placeholders(
            activity.description or description,
            activity,
        )

        try:
            activity.save()
        except Exception as e:
            logger.error(f"Failed to log activity: {activity.description} - {e}")
            raise

        logger.debug(f"Activity logged: [{activity.log_name}] {activity.description} (id={activity.pk})")
        self._activity = None
        return activity

    def without_logs(self, callback: Callable[[], Any]) -> Any:
        """
        Run ``callback`` with logging disabled and return its result.

        The previous status is restored even if the callback raises.
        """
        if self._log_status.disabled():
            return callback()

        self._log_status.disable()
        try:
            return callback()
        finally:
            self._log_status.enable()

    def replace_placeholders(self, description: str, activity) -> str:
        """
        Replace ``:subject.*``, ``:causer.*`` and ``:properties.*`` tokens.

        Single left-to-right pass; replacement text is not scanned again.
        """
        def replace(match):
            token = match.group(0)
            body = token[1:]
            attribute = body.split('.', 1)[0]

            if attribute not in PLACEHOLDER_ROOTS:
                return token

            # A token without a dot looks itself up, e.g. ':subject' -> 'subject'
            property_path = body.split('.', 1)[1] if '.' in body else body

            attribute_value = getattr(activity, attribute, None)
            if attribute_value is None:
                return token

            mapping = to_mapping(attribute_value)
            if mapping is None:
                return token

            value = get_by_path(mapping, property_path, _MISSING)
            if value is _MISSING:
                return token
            return '' if value is None else str(value)

        return PLACEHOLDER_PATTERN.sub(replace, description)

    def _get_activity(self):
        if self._activity is None:
            model_cls = config.get_activity_model()
            activity = model_cls(
                log_name=self._default_log_name or config.get_default_log_name(),
                properties={},
                batch_uuid=self._batch.get_uuid(),
            )
            self._set_causer(activity, self._causer_resolver.resolve())
            self._activity = activity
        return self._activity

    def _set_causer(self, activity, causer):
        if causer is not None:
            self._require_saved_model(causer, 'Causer')
        activity.causer = causer

    @staticmethod
    def _require_saved_model(model, role):
        if not isinstance(model, models.Model):
            raise InvalidArgument(f"{role} must be a model instance, got {type(model).__name__}")
        if model.pk is None:
            raise InvalidArgument(f"{role} {model.__class__.__name__} must be saved before it can be logged")
