"""Auth commands: obtain CMS access tokens from the terminal."""

import typer
from pydantic import ValidationError as PydanticValidationError

from cmsproxy.auth.schemas import LoginInput, RegisterInput
from cmsproxy.auth.service import AuthService
from cmsproxy.cms.client import CMSClient
from cmsproxy.config import settings
from cmsproxy.errors import ProxyError, ValidationError

from cli.rendering import exit_with_error

auth_app = typer.Typer(help="Log in or register against the CMS.")


@auth_app.command("login")
def auth_login(
    email: str = typer.Option(..., help="Account email."),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Account password."),
) -> None:
    """Log in and print the access token."""
    try:
        data = LoginInput(email=email, password=password)
    except PydanticValidationError as exc:
        exit_with_error(ValidationError.from_pydantic(exc.errors(), "Invalid login"))

    with CMSClient.from_settings(settings) as cms:
        try:
            result = AuthService(cms).login(data)
        except ProxyError as exc:
            exit_with_error(exc)
    typer.echo(f"✅ Logged in as {result.user.name} ({result.user.role})")
    typer.echo(result.access_token)


@auth_app.command("register")
def auth_register(
    name: str = typer.Option(..., help="Username."),
    email: str = typer.Option(..., help="Account email."),
    password: str = typer.Option(
        ..., prompt=True, hide_input=True, confirmation_prompt=True, help="Account password."
    ),
) -> None:
    """Register a new user and print the access token."""
    try:
        data = RegisterInput(name=name, email=email, password=password)
    except PydanticValidationError as exc:
        exit_with_error(ValidationError.from_pydantic(exc.errors(), "Invalid registration"))

    with CMSClient.from_settings(settings) as cms:
        try:
            result = AuthService(cms).register(data)
        except ProxyError as exc:
            exit_with_error(exc)
    typer.echo(f"✅ Registered {result.user.name} <{result.user.email}>")
    typer.echo(result.access_token)
