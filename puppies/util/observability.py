"""Logfire setup and instrumentation.

Application code calls logfire directly:

    logfire.info("Vote cast", image_id=image_id, up_votes=tally.up_votes)

    with logfire.span("flush_votes", images=count):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy import Engine

from puppies import __version__
from puppies.config import Settings

SERVICE_NAME = "puppies-api"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    observability = settings.observability

    console: logfire.ConsoleOptions | bool = False
    if observability.console:
        console = logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=__version__,
        environment=settings.environment,
        send_to_logfire=observability.sends,
        token=observability.logfire_token,
        console=console,
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=observability.sends,
        vote_store=settings.database.path,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app."""
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: Engine) -> None:
    """Trace every statement sent to the vote store."""
    logfire.instrument_sqlalchemy(engine=engine)


def instrument_httpx() -> None:
    """Trace outbound Flickr requests."""
    logfire.instrument_httpx()
