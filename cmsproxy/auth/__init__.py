"""Auth package: login / register against the CMS's built-in user routes."""

from cmsproxy.auth.schemas import AuthResult, AuthUser, LoginInput, RegisterInput
from cmsproxy.auth.service import AuthService

__all__ = ["AuthResult", "AuthService", "AuthUser", "LoginInput", "RegisterInput"]
