"""
Repositorio para la colección `user`.

`username` es único globalmente (índice único en bootstrap); un insert
duplicado deja subir `DuplicateKeyError` para que el servicio lo traduzca.
"""
from typing import Dict, Any, Optional

from app.core.time import now_iso
from app.infrastructure.db.mongo_async import get_async_db
from app.repositories.owned_repo import to_object_id

COLLECTION = "user"

# Nunca se expone el hash
PUBLIC_PROJECTION = {"passwordHash": 0}


def _coll():
    return get_async_db()[COLLECTION]


def to_public(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Documento de usuario sin `passwordHash` y con `id` (str)."""
    d = {k: v for k, v in doc.items() if k != "passwordHash"}
    d["id"] = str(d.pop("_id", ""))
    return d


async def insert_user(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Inserta usuario (username, passwordHash, fullname) y devuelve la vista pública."""
    now = now_iso()
    data = {
        "username": doc["username"],
        "passwordHash": doc["passwordHash"],
        "fullname": doc.get("fullname") or "",
        "createdAt": now,
        "updatedAt": now,
    }
    res = await _coll().insert_one(data)
    data["_id"] = res.inserted_id
    return to_public(data)


async def find_user_by_username(username: str) -> Optional[Dict[str, Any]]:
    """Usuario completo (incluye hash) para login."""
    return await _coll().find_one({"username": username})


async def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    oid = to_object_id(user_id)
    if oid is None:
        return None
    return await _coll().find_one({"_id": oid}, PUBLIC_PROJECTION)


async def delete_user(user_id: str) -> bool:
    """Borrado administrativo (sin endpoint HTTP)."""
    oid = to_object_id(user_id)
    if oid is None:
        return False
    res = await _coll().delete_one({"_id": oid})
    return res.deleted_count > 0
