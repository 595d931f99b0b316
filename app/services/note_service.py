"""
Servicio de notas: valida referencias (folder/tags) antes de cada escritura.
"""
from typing import Any, Dict, List, Optional

from app.core.exceptions import NotFoundError, ValidationError
from app.repositories.note_repo import notes
from app.services.integrity_service import validate_note_refs


async def list_notes(
    user_id: str,
    search_term: Optional[str] = None,
    title: Optional[str] = None,
    folder_id: Optional[str] = None,
    tag_id: Optional[str] = None,
) -> List[Dict[str, Any]]:
    return await notes.list_notes(user_id, search_term=search_term, title=title, folder_id=folder_id, tag_id=tag_id)


async def get_note(user_id: str, note_id: str) -> Dict[str, Any]:
    doc = await notes.get(user_id, note_id)
    if doc is None:
        raise NotFoundError("Note not found")
    return doc


async def create_note(user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    folder_id, tag_ids = await validate_note_refs(user_id, data.get("folderId") or None, data.get("tagIds"))
    doc: Dict[str, Any] = {
        "title": data["title"],
        "content": data.get("content") or "",
        "tagIds": tag_ids or [],
    }
    if folder_id:
        doc["folderId"] = folder_id
    return await notes.create(user_id, doc)


async def update_note(user_id: str, note_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """Actualización parcial. `folderId` null/"" quita el folder de la nota."""
    if "title" in data and not data["title"]:
        raise ValidationError("Missing 'title' in request body")

    set_fields: Dict[str, Any] = {}
    unset_fields: List[str] = []
    if "title" in data:
        set_fields["title"] = data["title"]
    if "content" in data:
        set_fields["content"] = data["content"] or ""

    folder_id = data.get("folderId") or None
    if "folderId" in data and not folder_id:
        unset_fields.append("folderId")

    folder_id, tag_ids = await validate_note_refs(
        user_id, folder_id, data.get("tagIds") if "tagIds" in data else None
    )
    if folder_id:
        set_fields["folderId"] = folder_id
    if "tagIds" in data:
        set_fields["tagIds"] = tag_ids or []

    doc = await notes.update(user_id, note_id, set_fields, unset_fields)
    if doc is None:
        raise NotFoundError("Note not found")
    return doc


async def delete_note(user_id: str, note_id: str) -> None:
    await notes.delete(user_id, note_id)
