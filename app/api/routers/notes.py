"""
Endpoints para `note`. Folder y tags referenciados se validan antes de escribir.
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_current_user, user_id_of
from app.api.schemas.note import NoteCreate, NoteOut, NoteUpdate
from app.core.config import settings
from app.services import note_service as service

router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get(
    "",
    response_model=List[NoteOut],
    summary="Listar notas",
    description="Lista notas del usuario con filtros opcionales (texto, título, folder, tag).",
)
async def list_notes(
    searchTerm: Optional[str] = Query(default=None, description="Subcadena en título o contenido"),
    title: Optional[str] = Query(default=None, description="Subcadena en el título"),
    folderId: Optional[str] = Query(default=None),
    tagId: Optional[str] = Query(default=None),
    user: Dict[str, Any] = Depends(get_current_user),
):
    return await service.list_notes(
        user_id_of(user), search_term=searchTerm, title=title, folder_id=folderId, tag_id=tagId
    )


@router.get("/{note_id}", response_model=NoteOut, summary="Obtener nota")
async def get_note(note_id: str, user: Dict[str, Any] = Depends(get_current_user)):
    return await service.get_note(user_id_of(user), note_id)


@router.post("", response_model=NoteOut, status_code=status.HTTP_201_CREATED, summary="Crear nota")
async def create_note(payload: NoteCreate, response: Response, user: Dict[str, Any] = Depends(get_current_user)):
    doc = await service.create_note(user_id_of(user), payload.model_dump())
    response.headers["Location"] = f"{settings.api_prefix_normalized}/notes/{doc['id']}"
    return doc


@router.put("/{note_id}", response_model=NoteOut, summary="Actualizar nota")
async def update_note(note_id: str, payload: NoteUpdate, user: Dict[str, Any] = Depends(get_current_user)):
    return await service.update_note(user_id_of(user), note_id, payload.model_dump(exclude_unset=True))


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response, summary="Eliminar nota")
async def delete_note(note_id: str, user: Dict[str, Any] = Depends(get_current_user)):
    await service.delete_note(user_id_of(user), note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
