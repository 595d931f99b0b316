"""
Servicio de folders: CRUD con dueño y limpieza de notas al borrar.
"""
import logging
from typing import Any, Dict, List, Optional

from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.repositories.folder_repo import folders
from app.repositories.note_repo import notes

_log = logging.getLogger("noteful.folders")

DUPLICATE = "Folder name already exists"


async def list_folders(user_id: str, name: Optional[str] = None) -> List[Dict[str, Any]]:
    return await folders.list(user_id, search=name)


async def get_folder(user_id: str, folder_id: str) -> Dict[str, Any]:
    doc = await folders.get(user_id, folder_id)
    if doc is None:
        raise NotFoundError("Folder not found")
    return doc


async def create_folder(user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    try:
        return await folders.create(user_id, {"name": data["name"]})
    except DuplicateKeyError:
        raise ConflictError(DUPLICATE)


async def update_folder(user_id: str, folder_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    if "name" in data and not data["name"]:
        raise ValidationError("Missing 'name' in request body")
    try:
        doc = await folders.update(user_id, folder_id, data)
    except DuplicateKeyError:
        raise ConflictError(DUPLICATE)
    if doc is None:
        raise NotFoundError("Folder not found")
    return doc


async def delete_folder(user_id: str, folder_id: str) -> None:
    """Borra el folder (si existe) y desvincula las notas que lo usaban."""
    if await folders.delete(user_id, folder_id):
        detached = await notes.detach_folder(user_id, folder_id)
        _log.info("Folder %s eliminado; notas desvinculadas=%s", folder_id, detached)
