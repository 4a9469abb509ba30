"""Logfire setup for the API process and the scripts.

Services emit spans and events through ``logfire`` directly; this module only
decides where they go and which frameworks are traced. Invitation and
password reset tokens are bearer secrets, so attributes named after them are
scrubbed on top of Logfire's default patterns.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from wingman.config import Settings

# Added to Logfire's defaults (password, secret, auth, cookie, ...)
SCRUBBED_ATTRIBUTES = ["reset_token", "invite_token"]


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise send iff a token is set."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Without a token everything stays on the console, which is what local
    development and the test suite want.

    Args:
        settings: Application settings
    """
    send = should_send_to_logfire(settings)

    logfire.configure(
        service_name="wingman-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # WebSocket scopes have no method
    mapped = dict(attributes)
    method = getattr(request, "method", None)
    if method:
        mapped["method"] = method
    mapped["path"] = request.url.path
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries on the engine, tagging the SQL with the current span."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
