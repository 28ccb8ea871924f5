# exceptions.py
"""
Application error taxonomy.

Each error carries the HTTP status it maps to and a message that is safe
to show to the caller. main.py registers the handlers that turn these into
{"error": "..."} responses.
"""
from fastapi import status


class AppError(Exception):
     """Base class for errors surfaced to API callers."""
     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
     default_message = "Internal server error"

     def __init__(self, message: str = None):
          self.message = message or self.default_message
          super().__init__(self.message)


class Unauthenticated(AppError):
     """No verified caller identity."""
     status_code = status.HTTP_401_UNAUTHORIZED
     default_message = "Unauthorized"


class InvalidInput(AppError):
     """A required field is missing or malformed."""
     status_code = status.HTTP_400_BAD_REQUEST
     default_message = "Invalid input"


class NotFound(AppError):
     """Entity is absent or not owned by the caller. The two are never distinguished."""
     status_code = status.HTTP_404_NOT_FOUND
     default_message = "Not found"


class PersistenceFailure(AppError):
     """The underlying store rejected or failed a read/write."""
     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
     default_message = "Internal server error"
