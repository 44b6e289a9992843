"""
Causer resolution for activities.

Decides who performed a logged action. Precedence is fixed and the
paths are never merged:

    1. resolver override callback (resolve_using)
    2. causer override instance (set_causer)
    3. default resolution: model instance, raw id, or the current user
"""

import logging
from typing import Callable, Optional, Type, Union

from django.apps import apps
from django.core.exceptions import ValidationError
from django.db import models

from activitylog.middleware import get_current_user

from . import config
from .exceptions import CouldNotLogActivity, InvalidArgument

logger = logging.getLogger(__name__)


class CauserResolver:
    """
    Resolves the causer (actor) of an activity.

    Instances are request-scoped: overrides installed on one resolver do
    not leak into another.

    Example:
        >>> resolver = CauserResolver()
        >>> resolver.resolve(request.user)    # model: returned as is
        >>> resolver.resolve(5)               # id: looked up on the auth model
        >>> resolver.resolve()                # current authenticated user or None
        >>> resolver.set_causer(system_user).resolve(5)  # override wins
    """

    def __init__(
        self,
        auth_model: Union[str, Type[models.Model], None] = None,
        user_getter: Optional[Callable[[], Optional[models.Model]]] = None,
    ):
        """
        Initialize the resolver.

        Args:
            auth_model: Model (or 'app_label.Model' label) used for id lookups;
                        defaults to ACTIVITYLOG['DEFAULT_AUTH_MODEL']
            user_getter: Callable returning the current user or None;
                         defaults to the CurrentUserMiddleware lookup
        """
        self._auth_model = auth_model
        self._user_getter = user_getter or get_current_user
        self._resolver_override: Optional[Callable[[], Optional[models.Model]]] = None
        self._causer_override: Optional[models.Model] = None

    def resolve(self, subject: Union[models.Model, int, str, None] = None) -> Optional[models.Model]:
        """
        Resolve the causer.

        Args:
            subject: Model instance, raw primary key, or None for the current user

        Returns:
            The causer model instance, or None when nobody is logged in

        Raises:
            CouldNotDetermineCauser: Override callback returned a non-model,
                                     or no record matches the given id
            InvalidArgument: subject is neither a model, an id nor None
        """
        if self._resolver_override is not None:
            result = self._resolver_override()
            if not self._is_resolvable(result):
                raise CouldNotLogActivity.could_not_determine_user(result)
            return result

        if self._causer_override is not None:
            return self._causer_override

        return self._get_causer(subject)

    def resolve_using(self, callback: Callable[[], Optional[models.Model]]) -> 'CauserResolver':
        """Install a callback that overrides all other resolution."""
        if not callable(callback):
            raise InvalidArgument(f"Causer resolver must be callable, got {type(callback).__name__}")
        self._resolver_override = callback
        logger.debug("Causer resolver override installed")
        return self

    def set_causer(self, causer: models.Model) -> 'CauserResolver':
        """Install a fixed causer used instead of default resolution."""
        if not isinstance(causer, models.Model):
            raise InvalidArgument(f"Causer must be a model instance, got {type(causer).__name__}")
        self._causer_override = causer
        logger.debug(f"Causer override set to {causer.__class__.__name__} (pk={causer.pk})")
        return self

    def reset(self) -> 'CauserResolver':
        """Remove the override callback and the fixed causer."""
        self._resolver_override = None
        self._causer_override = None
        return self

    def get_auth_model(self) -> Type[models.Model]:
        if self._auth_model is None:
            return config.get_auth_model()
        if isinstance(self._auth_model, str):
            return apps.get_model(self._auth_model)
        return self._auth_model

    def _get_causer(self, subject):
        if isinstance(subject, models.Model):
            return subject

        if subject is None:
            return self._get_default_causer()

        # bool is an int subclass but never a primary key
        if isinstance(subject, (int, str)) and not isinstance(subject, bool):
            return self._resolve_using_id(subject)

        raise InvalidArgument(
            f"Causer must be a model instance, an id or None, got {type(subject).__name__}"
        )

    def _resolve_using_id(self, subject):
        model_cls = self.get_auth_model()
        try:
            causer = model_cls._default_manager.filter(pk=subject).first()
        except (ValueError, TypeError, ValidationError):
            # Id of the wrong type for the primary key (e.g. 'abc' for an integer pk)
            causer = None

        if causer is None:
            raise CouldNotLogActivity.could_not_determine_user(subject)
        return causer

    def _get_default_causer(self):
        return self._user_getter()

    @staticmethod
    def _is_resolvable(value) -> bool:
        return value is None or isinstance(value, models.Model)
