from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.utils import timezone

from activitylog.services.serialization import get_by_path, model_to_mapping


class ActivityQuerySet(models.QuerySet):
    """Filtering helpers for activities."""

    def in_log(self, *log_names):
        """Filter by log name; accepts names or a single list of names."""
        if len(log_names) == 1 and isinstance(log_names[0], (list, tuple, set)):
            log_names = log_names[0]
        return self.filter(log_name__in=list(log_names))

    def caused_by(self, causer):
        return self.filter(
            causer_type=ContentType.objects.get_for_model(causer),
            causer_id=str(causer.pk),
        )

    def for_subject(self, subject):
        return self.filter(
            subject_type=ContentType.objects.get_for_model(subject),
            subject_id=str(subject.pk),
        )

    def for_event(self, event):
        return self.filter(event=event)

    def has_batch(self):
        return self.filter(batch_uuid__isnull=False)

    def for_batch(self, batch_uuid):
        return self.filter(batch_uuid=batch_uuid)

    def recent(self, limit=100):
        return self.order_by('-created_at')[:limit]


class Activity(models.Model):
    log_name = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    description = models.TextField()

    subject_type = models.ForeignKey(
        ContentType, on_delete=models.CASCADE, null=True, blank=True, related_name='+'
    )
    subject_id = models.CharField(max_length=255, null=True, blank=True)
    subject = GenericForeignKey('subject_type', 'subject_id')

    event = models.CharField(max_length=255, null=True, blank=True)

    causer_type = models.ForeignKey(
        ContentType, on_delete=models.CASCADE, null=True, blank=True, related_name='+'
    )
    causer_id = models.CharField(max_length=255, null=True, blank=True)
    causer = GenericForeignKey('causer_type', 'causer_id')

    properties = models.JSONField(default=dict, blank=True)
    batch_uuid = models.UUIDField(null=True, blank=True, db_index=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ActivityQuerySet.as_manager()

    class Meta:
        db_table = 'activity_log'
        ordering = ['-created_at']
        verbose_name_plural = 'Activities'
        indexes = [
            models.Index(fields=['subject_type', 'subject_id'], name='activity_log_subject_idx'),
            models.Index(fields=['causer_type', 'causer_id'], name='activity_log_causer_idx'),
        ]

    def __str__(self):
        causer_name = str(self.causer) if self.causer_id else 'System'
        return f"{causer_name} {self.description} at {self.created_at}"

    def get_extra_property(self, property_name, default=None):
        """Get a value from properties using dot notation (e.g. 'attributes.name')."""
        return get_by_path(self.properties or {}, property_name, default)

    @property
    def changes(self):
        """The change-tracking part of properties ('attributes' and 'old')."""
        return {
            key: value
            for key, value in (self.properties or {}).items()
            if key in ('attributes', 'old')
        }

    def to_dict(self):
        return model_to_mapping(self)
