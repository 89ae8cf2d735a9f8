"""Login and registration through the CMS's own auth routes.

Both calls go out without the service credential.  Upstream error detail is
logged but never handed back to the caller: a failed login is always just
"Invalid credentials".
"""

from __future__ import annotations

import logging

from cmsproxy.auth.mapper import to_auth_result
from cmsproxy.auth.schemas import AuthResult, LoginInput, RegisterInput
from cmsproxy.cms.client import CMSClient
from cmsproxy.errors import ConflictError, RegistrationError, UnauthorizedError, UpstreamError

logger = logging.getLogger(__name__)

# Substring of the CMS message for a duplicate email / username
# ("Email already taken", "Email or Username are already taken").
_DUPLICATE_MARKER = "already taken"


def _is_duplicate(exc: UpstreamError) -> bool:
    return bool(exc.detail) and _DUPLICATE_MARKER in exc.detail.lower()


class AuthService:
    def __init__(self, cms: CMSClient) -> None:
        self._cms = cms

    def login(self, data: LoginInput) -> AuthResult:
        try:
            response = self._cms.post_public(
                "/auth/local",
                {"identifier": data.email, "password": data.password},
            )
            return to_auth_result(response)
        except UpstreamError as exc:
            logger.warning(
                "Login failed for %s: %s", data.email, exc.detail or exc,
                extra={"endpoint": "auth.login", "email": data.email, "status_code": exc.status_code},
            )
            raise UnauthorizedError("Invalid credentials") from exc

    def register(self, data: RegisterInput) -> AuthResult:
        try:
            response = self._cms.post_public(
                "/auth/local/register",
                {"username": data.name, "email": data.email, "password": data.password},
            )
            return to_auth_result(response)
        except UpstreamError as exc:
            if _is_duplicate(exc):
                logger.info(
                    "Registration rejected, %s already exists", data.email,
                    extra={"endpoint": "auth.register", "email": data.email},
                )
                raise ConflictError("User with this email already exists") from exc
            logger.error(
                "Registration failed for %s: %s", data.email, exc.detail or exc,
                extra={"endpoint": "auth.register", "email": data.email, "status_code": exc.status_code},
            )
            raise RegistrationError("Registration failed") from exc
