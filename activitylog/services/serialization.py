"""
Serialization helpers for activity placeholders and properties.

Converts subjects, causers and property bags into plain nested mappings
and looks values up by dotted path.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from django.db import models

logger = logging.getLogger(__name__)

_MISSING = object()

# Never exposed, in addition to a model's own activitylog_hidden_fields
HIDDEN_FIELDS = ('password',)


def get_hidden_fields(instance: models.Model) -> set:
    return set(HIDDEN_FIELDS) | set(getattr(instance, 'activitylog_hidden_fields', ()))


def model_to_mapping(instance: models.Model) -> Dict[str, Any]:
    """
    Convert a Django model instance to a dict of its concrete field values.

    Foreign keys are exposed under their column name (``user_id``) with the
    raw id value. Hidden fields are left out.
    """
    hidden = get_hidden_fields(instance)
    data = {}
    for field in instance._meta.concrete_fields:
        if field.name in hidden or field.attname in hidden:
            continue
        data[field.attname] = field.value_from_object(instance)
    return data


def to_mapping(value: Any) -> Optional[Dict[str, Any]]:
    """
    Convert a subject, causer or properties value to a nested mapping.

    Resolution order:
        1. None stays None
        2. Mappings are copied into a dict
        3. Objects with a ``to_dict()`` method use it
        4. Django model instances use their concrete fields

    Args:
        value: Value to convert

    Returns:
        Dict, or None if the value cannot be converted
    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        return dict(value)
    to_dict = getattr(value, 'to_dict', None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, models.Model):
        return model_to_mapping(value)

    logger.debug(f"Cannot convert {type(value).__name__} to a mapping")
    return None


def get_by_path(data: Any, path: Optional[str], default: Any = None) -> Any:
    """
    Look up a value in nested mappings/lists using dot notation.

    A key containing dots is matched literally before the path is split.

    Example:
        >>> get_by_path({'attributes': {'name': 'Acme'}}, 'attributes.name')
        'Acme'
        >>> get_by_path({'tags': ['a', 'b']}, 'tags.1')
        'b'
    """
    if path is None:
        return data
    if isinstance(data, Mapping) and path in data:
        return data[path]

    current = data
    for segment in path.split('.'):
        if isinstance(current, Mapping):
            current = current.get(segment, _MISSING)
        elif isinstance(current, (list, tuple)) and segment.isdigit():
            index = int(segment)
            current = current[index] if index < len(current) else _MISSING
        else:
            current = _MISSING

        if current is _MISSING:
            return default
    return current
