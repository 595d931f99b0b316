"""Validación de referencias de una nota (folder y tags) antes de escribir.

Mongo no tiene claves foráneas: estas comprobaciones las sustituyen.
Todo id debe existir y ser del mismo usuario; si no, no se escribe nada.
Los ids se devuelven en forma canónica: es la que se guarda en la nota.
"""
from typing import Any, List, Optional, Tuple

from app.core.exceptions import ValidationError
from app.repositories.folder_repo import folders
from app.repositories.owned_repo import canonical_id
from app.repositories.tag_repo import tags


async def validate_folder_id(user_id: str, folder_id: Any) -> str:
    folder = await folders.get(user_id, folder_id) if isinstance(folder_id, str) else None
    if folder is None:
        raise ValidationError("The folderId is not valid")
    return folder["id"]


async def validate_tag_ids(user_id: str, tag_ids: Any) -> List[str]:
    """Devuelve los ids canónicos sin duplicados (orden preservado)."""
    if not isinstance(tag_ids, list) or not all(isinstance(t, str) for t in tag_ids):
        raise ValidationError("The tagIds are not valid")
    ids = [canonical_id(t) for t in tag_ids]
    if any(i is None for i in ids):
        raise ValidationError("The tagIds are not valid")
    uniq = list(dict.fromkeys(ids))
    if uniq and await tags.count_existing(user_id, uniq) != len(uniq):
        raise ValidationError("The tagIds are not valid")
    return uniq


async def validate_note_refs(
    user_id: str,
    folder_id: Optional[Any] = None,
    tag_ids: Optional[Any] = None,
) -> Tuple[Optional[str], Optional[List[str]]]:
    """Comprueba folder y tags (si vienen). Devuelve ambos normalizados."""
    if folder_id is not None:
        folder_id = await validate_folder_id(user_id, folder_id)
    if tag_ids is not None:
        tag_ids = await validate_tag_ids(user_id, tag_ids)
    return folder_id, tag_ids
