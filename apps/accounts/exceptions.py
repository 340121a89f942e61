"""
Account exceptions. Raised in services.py and caught in views.py, where
they turn into a re-rendered form with a message.
"""


class AccountError(Exception):
    """Base exception for signup/login failures."""
    pass


class AuthenticationFailure(AccountError):
    pass


class InvalidCredentials(AuthenticationFailure):
    """Unknown email or wrong password. Deliberately not told apart."""
    pass


class DuplicateEmail(AccountError):
    pass
