"""Map the CMS auth payload onto :class:`AuthResult`.

CMS shape::

    {"jwt": "...", "user": {"id": 1, "username": "jane", "email": "...",
                            "role": {"name": "Authenticated", ...}}}

``role`` is often left unpopulated by the CMS; the public role then defaults
to ``"user"``.
"""

from __future__ import annotations

from typing import Any

from cmsproxy.auth.schemas import AuthResult, AuthUser
from cmsproxy.errors import UpstreamError

DEFAULT_ROLE = "user"


def _role_name(user: dict[str, Any]) -> str:
    role = user.get("role")
    if isinstance(role, dict) and role.get("name"):
        return str(role["name"])
    return DEFAULT_ROLE


def to_auth_result(raw: Any) -> AuthResult:
    """Raises :class:`UpstreamError` when ``jwt`` or ``user`` is missing."""
    if not isinstance(raw, dict) or not raw.get("jwt") or not isinstance(raw.get("user"), dict):
        raise UpstreamError("CMS auth response has no 'jwt' / 'user'")
    user = raw["user"]
    try:
        return AuthResult(
            access_token=raw["jwt"],
            user=AuthUser(
                id=user["id"],
                name=user["username"],
                email=user["email"],
                role=_role_name(user),
            ),
        )
    except (KeyError, ValueError) as exc:
        raise UpstreamError(f"CMS returned a malformed user: {exc!r:.200}") from exc
