"""
Servicio de tags: CRUD con dueño y limpieza de notas al borrar.
"""
import logging
from typing import Any, Dict, List, Optional

from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.repositories.note_repo import notes
from app.repositories.tag_repo import tags

_log = logging.getLogger("noteful.tags")

DUPLICATE = "Tag name already exists"


async def list_tags(user_id: str, name: Optional[str] = None) -> List[Dict[str, Any]]:
    return await tags.list(user_id, search=name)


async def get_tag(user_id: str, tag_id: str) -> Dict[str, Any]:
    doc = await tags.get(user_id, tag_id)
    if doc is None:
        raise NotFoundError("Tag not found")
    return doc


async def create_tag(user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    try:
        return await tags.create(user_id, {"name": data["name"]})
    except DuplicateKeyError:
        raise ConflictError(DUPLICATE)


async def update_tag(user_id: str, tag_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    if "name" in data and not data["name"]:
        raise ValidationError("Missing 'name' in request body")
    try:
        doc = await tags.update(user_id, tag_id, data)
    except DuplicateKeyError:
        raise ConflictError(DUPLICATE)
    if doc is None:
        raise NotFoundError("Tag not found")
    return doc


async def delete_tag(user_id: str, tag_id: str) -> None:
    """Borra el tag (si existe) y lo saca de `tagIds` en las notas."""
    if await tags.delete(user_id, tag_id):
        detached = await notes.detach_tag(user_id, tag_id)
        _log.info("Tag %s eliminado; notas actualizadas=%s", tag_id, detached)
