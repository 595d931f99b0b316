"""
Bootstrap de la base Mongo: índices mínimos por colección.

Se ejecuta al inicio de la app. Los índices únicos son los que hacen cumplir
`username` global y `(userId, name)` por usuario en folders/tags.
No tumba la app si algo falla; deja warnings.
"""
from __future__ import annotations

from typing import Any, Dict, List
import logging
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from app.infrastructure.db.mongo_async import get_async_db
from app.repositories.user_repo import COLLECTION as USER_COLL
from app.repositories.folder_repo import folders
from app.repositories.tag_repo import tags
from app.repositories.note_repo import notes

_log = logging.getLogger("noteful.mongo.bootstrap")


INDEXES: Dict[str, List[Dict[str, Any]]] = {
    USER_COLL: [
        {"keys": [("username", ASCENDING)], "unique": True, "name": "username_unique"},
    ],
    folders.collection: [
        {"keys": [("userId", ASCENDING), ("name", ASCENDING)], "unique": True, "name": "user_name_unique"},
    ],
    tags.collection: [
        {"keys": [("userId", ASCENDING), ("name", ASCENDING)], "unique": True, "name": "user_name_unique"},
    ],
    notes.collection: [
        {"keys": [("userId", ASCENDING), ("title", ASCENDING)], "name": "user_title"},
        {"keys": [("userId", ASCENDING), ("folderId", ASCENDING)], "name": "user_folder"},
        {"keys": [("userId", ASCENDING), ("tagIds", ASCENDING)], "name": "user_tags"},
    ],
}


async def _ensure_indexes(name: str, indexes: List[Dict[str, Any]]) -> None:
    coll = get_async_db()[name]
    for ix in indexes:
        opts = dict(ix)
        keys = opts.pop("keys")
        try:
            await coll.create_index(keys, **opts)
        except PyMongoError as e:
            # p. ej. datos previos no únicos; la app sigue arrancando
            _log.warning("No se pudo crear índice en '%s' (%s): %s", name, keys, e)


async def ensure_collections() -> None:
    """Garantiza los índices de todas las colecciones."""
    for name, indexes in INDEXES.items():
        await _ensure_indexes(name, indexes)
    _log.info("Índices verificados: %s", ", ".join(INDEXES))
