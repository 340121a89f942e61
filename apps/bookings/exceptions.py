"""
Custom exceptions for the booking wizard and reservation store.
Raised in wizard.py / engine.py and caught in views for clean error handling.
"""


class BookingEngineError(Exception):
    """Base exception for all booking engine errors."""
    pass


class PrerequisiteMissing(BookingEngineError):
    """Raised when a wizard step is reached before the step it depends on."""

    def __init__(self, step, message=''):
        self.step = step
        super().__init__(message or f"Complete the {step.label} step first.")


class EntityNotFound(BookingEngineError):
    """Raised for unknown car/insurance/location ids and for reservations the user does not own."""
    pass
