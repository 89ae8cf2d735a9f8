"""Authentication endpoints.

Routes
------
POST /auth/login     Exchange email + password for a CMS access token
POST /auth/register  Create a CMS user and return its access token
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from cmsproxy.auth.schemas import AuthResult, LoginInput, RegisterInput
from cmsproxy.auth.service import AuthService

router = APIRouter()


@router.post("/login", response_model=AuthResult)
def login(body: LoginInput, request: Request) -> AuthResult:
    return AuthService(request.app.state.cms).login(body)


@router.post("/register", response_model=AuthResult)
def register(body: RegisterInput, request: Request) -> AuthResult:
    return AuthService(request.app.state.cms).register(body)
