"""
Custom exceptions for the application.

Every error raised by the request handlers is one of the kinds below; the
handlers in ``main.py`` turn them into plain-text responses using
``status_code``.
"""
from fastapi import status


class ExerciseTrackerException(Exception):
    """Base exception for all Exercise Tracker application exceptions."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ExerciseTrackerException):
    """Raised when a request is missing fields or violates a constraint."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class NotFoundError(ExerciseTrackerException):
    """Raised when a requested resource is not found."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "not found"


class InternalError(ExerciseTrackerException):
    """Raised when an operation fails for a reason the client cannot fix."""
    pass
