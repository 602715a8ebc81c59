"""Exception types raised by the forum services."""

from fastapi import status


class ConfigurationError(RuntimeError):
    """Required configuration is missing. Fatal at startup."""


class HashingError(RuntimeError):
    """The password hashing primitive could not run."""


class ForumError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None, field: str | None = None):
        self.message = message or self.default_message
        self.field = field
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body: dict = {"message": self.message}
        if self.field:
            body["field"] = self.field
        return body


class ValidationError(ForumError):
    """Request data failed presence or format checks."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request validation failed."

    def __init__(self, message: str | None = None, errors: list[dict] | None = None):
        self.errors = errors or []
        field = self.errors[0]["field"] if len(self.errors) == 1 else None
        super().__init__(message, field=field)

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.errors:
            body["errors"] = self.errors
        return body


class AuthenticationError(ForumError):
    """Missing, expired or invalid token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized"


class InvalidCredentialsError(AuthenticationError):
    """Login failed. Same message whether the account exists or not."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid email or password."


class ConflictError(ForumError):
    """Email or username already registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already registered."


class NotFoundError(ForumError):
    """No route matched the request path."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"

    def __init__(self, path: str):
        self.path = path
        super().__init__()

    def to_dict(self) -> dict:
        return {"error": self.message, "path": self.path}


class ServerError(ForumError):
    """Store or unexpected failure; details stay in the log."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
