"""
Endpoints para `folder`. Todo acceso queda limitado al usuario del token.
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_current_user, user_id_of
from app.api.schemas.folder import FolderCreate, FolderOut, FolderUpdate
from app.core.config import settings
from app.services import folder_service as service

router = APIRouter(prefix="/folders", tags=["Folders"])


@router.get("", response_model=List[FolderOut], summary="Listar folders")
async def list_folders(
    name: Optional[str] = Query(default=None, description="Filtro por subcadena del nombre"),
    user: Dict[str, Any] = Depends(get_current_user),
):
    return await service.list_folders(user_id_of(user), name=name)


@router.get("/{folder_id}", response_model=FolderOut, summary="Obtener folder")
async def get_folder(folder_id: str, user: Dict[str, Any] = Depends(get_current_user)):
    return await service.get_folder(user_id_of(user), folder_id)


@router.post("", response_model=FolderOut, status_code=status.HTTP_201_CREATED, summary="Crear folder")
async def create_folder(payload: FolderCreate, response: Response, user: Dict[str, Any] = Depends(get_current_user)):
    doc = await service.create_folder(user_id_of(user), payload.model_dump())
    response.headers["Location"] = f"{settings.api_prefix_normalized}/folders/{doc['id']}"
    return doc


@router.put("/{folder_id}", response_model=FolderOut, summary="Actualizar folder")
async def update_folder(folder_id: str, payload: FolderUpdate, user: Dict[str, Any] = Depends(get_current_user)):
    return await service.update_folder(user_id_of(user), folder_id, payload.model_dump(exclude_unset=True))


@router.delete(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Eliminar folder",
    description="Elimina el folder y lo quita de las notas que lo referencian.",
)
async def delete_folder(folder_id: str, user: Dict[str, Any] = Depends(get_current_user)):
    await service.delete_folder(user_id_of(user), folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
