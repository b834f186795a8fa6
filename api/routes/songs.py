# api/routes/songs.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_song_service
from services.songs.schemas import DeleteResponse, SongIdResponse, SongMetadata
from services.songs.service import SongService

router = APIRouter()

@router.post("/songs", response_model=SongIdResponse)
async def create_song(metadata: SongMetadata, service: SongService = Depends(get_song_service)):
    return SongIdResponse(id=await service.create_song(metadata))

@router.get("/songs/{id}", response_model=SongMetadata)
async def get_song(id: str, service: SongService = Depends(get_song_service)):
    return await service.get_song(id)

@router.delete("/songs", response_model=DeleteResponse)
async def delete_songs(
    id: Optional[str] = Query(None),
    service: SongService = Depends(get_song_service),
):
    return DeleteResponse(ids=await service.delete_songs(id))
