"""Error taxonomy shared by services and mapped to HTTP responses in app.main."""

from typing import Any


class ServiceError(Exception):
    """Base for expected failures; carries a stable kind, HTTP status and client-safe message."""

    kind = "internal_error"
    status_code = 500

    def __init__(self, message: str, details: Any | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.kind, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(ServiceError):
    """Malformed or inconsistent input; always client-correctable."""

    kind = "validation_error"
    status_code = 400


class AuthenticationError(ServiceError):
    """No session, unknown session, or bad credentials."""

    kind = "authentication_error"
    status_code = 401


class InvalidCredentialsError(AuthenticationError):
    """Login with unknown email, missing digest or wrong password; reported as bad input."""

    status_code = 400


class AuthorizationError(ServiceError):
    """Authenticated, but the role, tenant or approval state does not allow the operation."""

    kind = "authorization_error"
    status_code = 403


class NotFoundError(ServiceError):
    """Resource absent, or owned by another hotel."""

    kind = "not_found"
    status_code = 404


class ConflictError(ServiceError):
    """Uniqueness violation (email, room number)."""

    kind = "conflict"
    status_code = 409


class InternalError(ServiceError):
    """Unexpected storage or infrastructure failure. Message is always generic."""

    kind = "internal_error"
    status_code = 500


class TransientError(ServiceError):
    """Datastore unreachable or timed out; the caller may retry."""

    kind = "transient_error"
    status_code = 503
