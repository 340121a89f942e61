"""
Auth gateway — signup, login and logout on top of django.contrib.auth.

Users are stored in Django's auth_user table: the lower-cased email is used
as both username and email, the display name goes in first_name, and the
password is stored as Django's salted hash.
"""
import logging

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.db import IntegrityError, transaction

from .exceptions import DuplicateEmail, InvalidCredentials

logger = logging.getLogger(__name__)

MODEL_BACKEND = 'django.contrib.auth.backends.ModelBackend'


def normalize_email(raw: str) -> str:
    return (raw or '').strip().lower()


def register_user(request, name: str, email: str, password: str):
    """Create the user and log them in. Raises DuplicateEmail."""
    User = get_user_model()
    email = normalize_email(email)

    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmail("Email already in use")

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                username=email,
                email=email,
                password=password,
                first_name=name.strip(),
            )
    except IntegrityError as exc:
        # Lost a race with a concurrent signup for the same address.
        raise DuplicateEmail("Email already in use") from exc

    login(request, user, backend=MODEL_BACKEND)
    logger.info('New user %s signed up', user.pk)
    return user


def authenticate_user(request, email: str, password: str):
    """Verify credentials and log the user in. Raises InvalidCredentials."""
    email = normalize_email(email)
    user = authenticate(request, username=email, password=password)
    if user is None:
        logger.warning('Failed login attempt for %s', email)
        raise InvalidCredentials("Invalid email or password")

    login(request, user)
    logger.info('User %s logged in', user.pk)
    return user


def logout_user(request) -> None:
    """Drops the identity and everything else in the session, draft included."""
    logout(request)
