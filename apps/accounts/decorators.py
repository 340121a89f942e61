"""
Customer authentication gate.

Every wizard and reservation view requires a logged-in user. Anonymous
requests are redirected to the login page, preserving ?next= for the
post-login redirect.
"""
from functools import wraps
from urllib.parse import urlencode

from django.conf import settings
from django.shortcuts import redirect


def customer_login_required(view_func):
    """Require is_authenticated. Redirect to login otherwise."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect(f"{settings.LOGIN_URL}?{urlencode({'next': request.path}, safe='/')}")
        return view_func(request, *args, **kwargs)
    return wrapper
