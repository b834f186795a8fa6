# api/routes/resources.py
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Request, Response

from api.dependencies import get_resource_service
from services.resources.service import AUDIO_MPEG, ResourceService
from services.songs.schemas import DeleteResponse

router = APIRouter()

@router.post("/resources")
async def upload_resource(
    request: Request,
    content_type: Optional[str] = Header(None),
    service: ResourceService = Depends(get_resource_service),
):
    data = await request.body()
    resource_id = await service.upload_resource(data, content_type)
    return {"id": resource_id}

@router.get("/resources/{id}")
async def get_resource(id: str, service: ResourceService = Depends(get_resource_service)):
    data = await service.get_resource(id)
    return Response(content=data, media_type=AUDIO_MPEG)

@router.delete("/resources", response_model=DeleteResponse)
async def delete_resources(
    id: Optional[str] = Query(None),
    service: ResourceService = Depends(get_resource_service),
):
    return DeleteResponse(ids=await service.delete_resources(id))
