"""MentorHub CLI — run the API server, inspect tokens.

Usage:
    mentorhub serve                          # Run the API on settings.host:settings.port
    mentorhub serve --port 8080 --reload     # Dev server with autoreload
    mentorhub decode-token <token>           # Verify a token and print its claims
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from mentorhub.auth.jwt import TokenError, verify_token
from mentorhub.config import settings

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _pretty_json(data: dict | list) -> str:
    return json.dumps(data, indent=2, default=str)


def _warn_if_insecure() -> None:
    if settings.uses_insecure_secret:
        click.secho(
            "Warning: using the built-in default JWT secret. "
            "Set MENTORHUB_JWT_SECRET before exposing this server.",
            fg="yellow",
            err=True,
        )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="mentorhub")
def cli():
    """MentorHub — mentorship platform backend."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default: settings.host).")
@click.option("--port", type=int, default=None, help="Port (default: settings.port).")
@click.option("--reload", is_flag=True, help="Restart on code changes (development).")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the API server with uvicorn."""
    import uvicorn

    _warn_if_insecure()
    uvicorn.run(
        "mentorhub.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@cli.command("decode-token")
@click.argument("token")
def decode_token(token: str):
    """Verify TOKEN with the configured secret and print its claims."""
    try:
        claims = verify_token(token)
    except TokenError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    click.echo(
        _pretty_json(
            {"id": claims.user_id, "email": claims.email, "role": claims.role.value}
        )
    )


if __name__ == "__main__":
    cli()
