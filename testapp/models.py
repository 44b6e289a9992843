"""
Models used as activity subjects in the activitylog test suite.
"""
import uuid

from django.conf import settings
from django.db import models


class Article(models.Model):
    name = models.CharField(max_length=255)
    text = models.TextField(blank=True)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name


class Document(models.Model):
    """Subject with a UUID primary key."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)

    def to_dict(self):
        return {'title': self.title, 'meta': {'kind': 'document'}}
