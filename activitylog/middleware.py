"""
Middleware exposing the authenticated request user to the activity log.

Add after AuthenticationMiddleware:

    MIDDLEWARE = [
        ...
        'django.contrib.auth.middleware.AuthenticationMiddleware',
        'activitylog.middleware.CurrentUserMiddleware',
    ]
"""
import threading

_thread_locals = threading.local()


def get_current_user():
    """
    Get the user authenticated on the current request thread.

    Returns:
        User instance, or None when no request is active or the user
        is anonymous
    """
    user = getattr(_thread_locals, 'user', None)
    if user is None or not getattr(user, 'is_authenticated', False):
        return None
    return user


def set_current_user(user):
    """Set the current user explicitly (management commands, tasks, tests)."""
    _thread_locals.user = user


def clear_current_user():
    try:
        delattr(_thread_locals, 'user')
    except AttributeError:
        pass


class CurrentUserMiddleware:
    """
    Stores ``request.user`` in thread-local storage for the duration of
    the request so CauserResolver can fall back to it.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        set_current_user(getattr(request, 'user', None))
        try:
            return self.get_response(request)
        finally:
            clear_current_user()
