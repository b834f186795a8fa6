# api/resource_main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api.errors import register_error_handlers
from api.middleware import RequestLoggingMiddleware
from api.routes import resources
from api.routes.health import create_health_router
from config.settings import configure_logging
from models.database import get_resource_session
from services.sync.client import SongServiceClient


def create_app(song_client: Optional[SongServiceClient] = None) -> FastAPI:
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.song_client = song_client or SongServiceClient.from_settings()
        try:
            yield
        finally:
            await app.state.song_client.close()

    app = FastAPI(title="Resource Service API", version="0.1.0", lifespan=lifespan)
    # Available before startup too, e.g. for clients that skip the lifespan
    app.state.song_client = song_client

    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    app.include_router(create_health_router("resource-service", get_resource_session), tags=["health"])
    app.include_router(resources.router, tags=["resources"])
    return app


app = create_app()
