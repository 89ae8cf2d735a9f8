"""Error taxonomy for the proxy.

Every error carries a machine-readable ``code`` and the HTTP status the API
reports it with.  ``to_response()`` builds the JSON envelope returned to
clients; upstream detail stored on :class:`UpstreamError` never appears in it.
"""

from __future__ import annotations

from typing import Any, Optional


class ProxyError(Exception):
    """Base class for every error the API translates into a response."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str, details: Optional[list[dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"error": error}


class ValidationError(ProxyError):
    """Malformed client input.  ``details`` lists the offending fields."""

    code = "VALIDATION_ERROR"
    http_status = 400

    @classmethod
    def from_pydantic(cls, errors: list[dict[str, Any]], message: str = "Invalid request data") -> "ValidationError":
        """Build from ``pydantic.ValidationError.errors()`` style entries."""
        return cls(
            message,
            details=[
                {
                    "field": ".".join(str(loc) for loc in e.get("loc", ())),
                    "message": e.get("msg", ""),
                    "type": e.get("type", ""),
                }
                for e in errors
            ],
        )


class NotFoundError(ProxyError):
    code = "NOT_FOUND"
    http_status = 404


class UnauthorizedError(ProxyError):
    code = "UNAUTHORIZED"
    http_status = 401


class ConflictError(ProxyError):
    code = "CONFLICT"
    http_status = 409


class RegistrationError(ProxyError):
    """Registration rejected upstream for a reason other than a duplicate."""

    code = "REGISTRATION_FAILED"
    http_status = 401


class UpstreamError(ProxyError):
    """The CMS could not be reached or answered with a failure.

    Attributes:
        status_code: HTTP status returned by the CMS, ``None`` for transport
            failures (connection refused, timeout, bad JSON).
        detail: The CMS's own error message, kept for logging and for
            classifying failures.  Not exposed to API clients.
    """

    code = "UPSTREAM_ERROR"
    http_status = 502

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
