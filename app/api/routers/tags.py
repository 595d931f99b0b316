"""
Endpoints para `tag`. Todo acceso queda limitado al usuario del token.
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_current_user, user_id_of
from app.api.schemas.tag import TagCreate, TagOut, TagUpdate
from app.core.config import settings
from app.services import tag_service as service

router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get("", response_model=List[TagOut], summary="Listar tags")
async def list_tags(
    name: Optional[str] = Query(default=None, description="Filtro por subcadena del nombre"),
    user: Dict[str, Any] = Depends(get_current_user),
):
    return await service.list_tags(user_id_of(user), name=name)


@router.get("/{tag_id}", response_model=TagOut, summary="Obtener tag")
async def get_tag(tag_id: str, user: Dict[str, Any] = Depends(get_current_user)):
    return await service.get_tag(user_id_of(user), tag_id)


@router.post("", response_model=TagOut, status_code=status.HTTP_201_CREATED, summary="Crear tag")
async def create_tag(payload: TagCreate, response: Response, user: Dict[str, Any] = Depends(get_current_user)):
    doc = await service.create_tag(user_id_of(user), payload.model_dump())
    response.headers["Location"] = f"{settings.api_prefix_normalized}/tags/{doc['id']}"
    return doc


@router.put("/{tag_id}", response_model=TagOut, summary="Actualizar tag")
async def update_tag(tag_id: str, payload: TagUpdate, user: Dict[str, Any] = Depends(get_current_user)):
    return await service.update_tag(user_id_of(user), tag_id, payload.model_dump(exclude_unset=True))


@router.delete(
    "/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Eliminar tag",
    description="Elimina el tag y lo quita de `tagIds` en las notas.",
)
async def delete_tag(tag_id: str, user: Dict[str, Any] = Depends(get_current_user)):
    await service.delete_tag(user_id_of(user), tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
