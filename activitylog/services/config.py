"""
Configuration layer for the activity log.

Reads the ``ACTIVITYLOG`` dict from Django settings, merged over DEFAULTS.
Settings are read on every call so ``override_settings`` works in tests.

Example settings:

    ACTIVITYLOG = {
        'ENABLED': True,
        'DEFAULT_LOG_NAME': 'default',
        'DEFAULT_AUTH_MODEL': 'auth.User',
        'ACTIVITY_MODEL': 'activitylog.Activity',
        'DELETE_RECORDS_OLDER_THAN_DAYS': 365,
    }
"""

from typing import Any, Type

from django.apps import apps
from django.conf import settings
from django.db import models

from .exceptions import InvalidArgument


SETTINGS_NAME = "ACTIVITYLOG"

DEFAULTS = {
    'ENABLED': True,
    'DEFAULT_LOG_NAME': 'default',
    'DEFAULT_AUTH_MODEL': None,  # falls back to settings.AUTH_USER_MODEL
    'ACTIVITY_MODEL': 'activitylog.Activity',
    'DELETE_RECORDS_OLDER_THAN_DAYS': 365,
}


def get_setting(key: str) -> Any:
    """
    Get a single activity log setting.

    Args:
        key: Setting name (e.g. 'DEFAULT_LOG_NAME')

    Returns:
        The configured value, or the default when not configured

    Raises:
        KeyError: If the key is unknown
    """
    if key not in DEFAULTS:
        raise KeyError(f"Unknown activity log setting: {key}")
    user_settings = getattr(settings, SETTINGS_NAME, None) or {}
    return user_settings.get(key, DEFAULTS[key])


def is_enabled() -> bool:
    """Initial enabled state for a new LogStatus."""
    return bool(get_setting('ENABLED'))


def get_default_log_name() -> str:
    return get_setting('DEFAULT_LOG_NAME')


def get_delete_records_older_than_days() -> int:
    return int(get_setting('DELETE_RECORDS_OLDER_THAN_DAYS'))


def get_auth_model() -> Type[models.Model]:
    """
    Get the model used to look up causers by raw id.

    Returns:
        Model class named by DEFAULT_AUTH_MODEL, or the project's user model
    """
    label = get_setting('DEFAULT_AUTH_MODEL') or settings.AUTH_USER_MODEL
    return apps.get_model(label)


def get_activity_model() -> Type[models.Model]:
    """
    Get the model used to store activities.

    Returns:
        Model class named by ACTIVITY_MODEL

    Raises:
        InvalidArgument: If the model does not extend activitylog.models.Activity
    """
    from activitylog.models import Activity

    label = get_setting('ACTIVITY_MODEL')
    model_cls = apps.get_model(label)
    if not issubclass(model_cls, Activity):
        raise InvalidArgument(
            f"The given model class `{label}` does not extend `activitylog.models.Activity`"
        )
    return model_cls
