"""
Authsession - command line host

Thin host around the session manager: it loads configuration, wires the
session stack, calls initialize() where a command needs the current
status, and prints the result.
"""

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional, TypeVar

import click
import httpx
import jwt
from dotenv import load_dotenv

from authsession.config.provider import ClientConfig, EnvConfigProvider
from authsession.logging_config import configure_logging
from authsession.modules.api.models import AuthStatus, User
from authsession.modules.auth import AuthenticationError, SessionFactory, SessionManager

load_dotenv()

logger = logging.getLogger("authsession.cli")

T = TypeVar("T")


def create_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """Create the HTTP client used for one CLI invocation."""
    return httpx.AsyncClient(timeout=config.timeout, verify=config.verify_tls)


def token_expiry(token: Optional[str]) -> Optional[datetime]:
    """
    Read the ``exp`` claim of a JWT token without verifying it.

    Only used for display; tokens that are not JWTs have no expiry.
    """
    if not token:
        return None
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError:
        return None

    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        return None
    return datetime.fromtimestamp(exp, tz=timezone.utc)


def run_with_session(action: Callable[[SessionManager], Awaitable[T]]) -> T:
    """Build a session manager from the environment and run action with it."""
    provider = EnvConfigProvider()
    try:
        client_config = provider.get_client_config()
        provider.get_storage_config()
    except ValueError as e:
        raise click.ClickException(str(e))

    async def _run() -> T:
        async with create_http_client(client_config) as http_client:
            manager = SessionFactory.build(provider, http_client=http_client)
            return await action(manager)

    return asyncio.run(_run())


def format_user(user: Optional[User]) -> str:
    if user is None:
        return "-"
    return json.dumps(user.model_dump(mode="json", exclude_none=True), sort_keys=True)


def echo_session(manager: SessionManager) -> None:
    click.echo(f"status: {manager.auth_status.value}")
    click.echo(f"user: {format_user(manager.current_user)}")

    expires_at = token_expiry(manager.token)
    if expires_at is not None:
        click.echo(f"token expires: {expires_at.isoformat()}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Manage the authentication session stored on this machine."""
    level = "DEBUG" if verbose else EnvConfigProvider().get_log_level()
    try:
        configure_logging(level)
    except ValueError:
        raise click.ClickException(f"Invalid AUTHSESSION_LOG_LEVEL '{level}'")


@cli.command()
@click.option("--email", prompt=True, help="Account email")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
def login(email: str, password: str):
    """Log in and store the session token."""

    async def action(manager: SessionManager) -> SessionManager:
        await manager.login(email, password)
        return manager

    try:
        manager = run_with_session(action)
    except AuthenticationError as e:
        logger.debug(f"Login failed with status {e.status_code}")
        raise click.ClickException(e.message)

    click.echo(f"Logged in as {format_user(manager.current_user)}")


@cli.command()
def status():
    """Verify the stored token and show the session."""

    async def action(manager: SessionManager) -> SessionManager:
        await manager.initialize()
        return manager

    echo_session(run_with_session(action))


@cli.command()
@click.pass_context
def whoami(ctx: click.Context):
    """Show the current user; exit with status 1 when not authenticated."""

    async def action(manager: SessionManager) -> SessionManager:
        await manager.initialize()
        return manager

    manager = run_with_session(action)
    if manager.auth_status is not AuthStatus.AUTHENTICATED:
        click.echo("Not authenticated", err=True)
        ctx.exit(1)

    click.echo(format_user(manager.current_user))


@cli.command()
def logout():
    """Remove the stored session token."""
    try:
        manager = SessionFactory.build_offline(EnvConfigProvider())
    except ValueError as e:
        raise click.ClickException(str(e))

    manager.logout()
    click.echo("Logged out")


def main():
    cli()


if __name__ == "__main__":
    main()
