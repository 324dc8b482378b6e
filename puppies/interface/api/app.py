"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI

from puppies import __version__
from puppies.config import Settings
from puppies.domain.service import ReconcileService
from puppies.interface.api.routes import health, images, search, votes
from puppies.util.di.container import create_container, setup_di
from puppies.util.observability import instrument_fastapi, instrument_httpx


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the vote store on startup and flush the registry on shutdown.

    Startup is fail-fast: a store that cannot be opened or prepared aborts
    the application.
    """
    container: AsyncContainer = app.state.dishka_container
    try:
        settings = await container.get(Settings)
        reconcile_service = await container.get(ReconcileService)
        reconcile_service.initialize_schema(
            cold_start=settings.database.reset_on_start
        )
    except Exception as e:
        logfire.error("Startup failed", error=str(e), error_type=type(e).__name__)
        # Release the engine and anything else the container already built
        await container.close()
        raise

    yield

    try:
        if settings.persistence.flush_on_shutdown:
            reconcile_service.flush()
    finally:
        await container.close()
        logfire.info("Container closed")


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container when omitted
    """
    # Instrument httpx for outbound Flickr requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Puppies API",
        description="Vote on puppy photos from Flickr",
        version=__version__,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(search.router)
    app_instance.include_router(images.router)
    app_instance.include_router(votes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
