import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI

from relay import __version__
from relay.api import create_api_router
from relay.core.config import Settings, get_settings
from relay.core.container import ApplicationContainer
from relay.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the relay app; ``transport`` replaces the LootLocker network layer."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        container = ApplicationContainer.build(settings, transport=transport)
        app.state.container = container
        missing = settings.missing_credentials()
        if missing:
            logger.warning("Missing configuration: %s", ", ".join(missing))
        logger.info(
            "LootLocker Server API backend running on http://localhost:%s (game_id=%s, game_version=%s)",
            settings.port,
            settings.game_id,
            settings.game_version,
        )
        try:
            yield
        finally:
            await container.aclose()

    app = FastAPI(
        title=settings.project_name,
        description="Relays signed game-round settlements to LootLocker wallets",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.include_router(create_api_router())
    return app


def run() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


app = create_app()
