# models/__init__.py 
from models.resource import Resource
from models.song import Song
from models.database import (
    Base,
    get_engine,
    get_session_factory,
    get_resource_session,
    get_song_session,
    init_models,
)

__all__ = [
    "Resource",
    "Song",
    "Base",
    "get_engine",
    "get_session_factory",
    "get_resource_session",
    "get_song_session",
    "init_models",
]
