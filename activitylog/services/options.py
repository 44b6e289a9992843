"""
Per-model activity log options.

Describes what an entity-lifecycle observer should log for a model.
The evaluation of these flags happens in the observer, not here.

Example:
    >>> class Article(models.Model):
    ...     def get_activitylog_options(self):
    ...         return (
    ...             ActivityLogOptions.defaults()
    ...             .log_only(['name', 'text'])
    ...             .log_only_dirty_attributes()
    ...             .dont_submit_empty_logs()
    ...             .set_description_for_event(lambda event: f"Article was {event}")
    ...         )
"""

from typing import Callable, Iterable, List, Optional


class ActivityLogOptions:
    """Fluent value object; every builder returns the instance."""

    def __init__(self):
        self.log_name: Optional[str] = None
        self.submit_empty_logs: bool = True
        self.log_fillable: bool = False
        self.log_only_dirty: bool = False
        self.log_unguarded: bool = False
        self.log_attributes: List[str] = []
        self.log_except_attributes: List[str] = []
        self.dont_log_if_attributes_changed_bag: List[str] = []
        self.description_for_event: Optional[Callable[[str], str]] = None

    # Builders named like a flag attribute carry an _attributes suffix.

    @classmethod
    def defaults(cls) -> 'ActivityLogOptions':
        return cls()

    def log_all(self) -> 'ActivityLogOptions':
        return self.log_only(['*'])

    def log_unguarded_attributes(self) -> 'ActivityLogOptions':
        self.log_unguarded = True
        return self

    def log_fillable_attributes(self) -> 'ActivityLogOptions':
        self.log_fillable = True
        return self

    def dont_log_fillable(self) -> 'ActivityLogOptions':
        self.log_fillable = False
        return self

    def log_only_dirty_attributes(self) -> 'ActivityLogOptions':
        self.log_only_dirty = True
        return self

    def log_only(self, attributes: Iterable[str]) -> 'ActivityLogOptions':
        self.log_attributes = list(attributes)
        return self

    def log_except(self, attributes: Iterable[str]) -> 'ActivityLogOptions':
        self.log_except_attributes = list(attributes)
        return self

    def dont_log_if_attributes_changed_only(self, attributes: Iterable[str]) -> 'ActivityLogOptions':
        self.dont_log_if_attributes_changed_bag = list(attributes)
        return self

    def dont_submit_empty_logs(self) -> 'ActivityLogOptions':
        self.submit_empty_logs = False
        return self

    def use_log_name(self, log_name: str) -> 'ActivityLogOptions':
        self.log_name = log_name
        return self

    def set_description_for_event(self, callback: Callable[[str], str]) -> 'ActivityLogOptions':
        self.description_for_event = callback
        return self

    def description_for(self, event_name: str) -> Optional[str]:
        """Evaluate the description template for an event, or None if unset."""
        if self.description_for_event is None:
            return None
        return self.description_for_event(event_name)

    def __repr__(self):
        return (
            f"<ActivityLogOptions log_name={self.log_name!r} "
            f"log_attributes={self.log_attributes!r} only_dirty={self.log_only_dirty}>"
        )
