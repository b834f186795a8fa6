# api/song_main.py
from fastapi import FastAPI

from api.errors import register_error_handlers
from api.middleware import RequestLoggingMiddleware
from api.routes import songs
from api.routes.health import create_health_router
from config.settings import configure_logging
from models.database import get_song_session


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="Song Service API", version="0.1.0")

    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    app.include_router(create_health_router("song-service", get_song_session), tags=["health"])
    app.include_router(songs.router, tags=["songs"])
    return app


app = create_app()
