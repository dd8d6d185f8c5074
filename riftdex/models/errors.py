"""
Error taxonomy.

Every failure a request handler can report is one of these exceptions.
The API layer turns them into a status code and a plain ``{"error": ...}``
body; nothing else about the failure reaches the client.
"""

from fastapi import status


class RiftdexError(Exception):
    """
    Base class for known, explainable failures.

    Subclasses fix the HTTP status; the message is shown to the client
    as-is, so it must never include internal details.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(RiftdexError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(RiftdexError):
    """Bad credentials, or a missing, invalid or expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(RiftdexError):
    """No record matches."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(RiftdexError):
    """A unique key is already taken."""

    status_code = status.HTTP_409_CONFLICT


class InternalError(RiftdexError):
    """Unexpected store or runtime failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
