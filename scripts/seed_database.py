"""
Seed de datos de ejemplo para Noteful (MongoDB).

Borra y vuelve a insertar usuarios, folders, tags y notas; crea los índices.
Ejecuta desde la raíz del repo con:
    python -m scripts.seed_database

Todos los usuarios usan la contraseña `password123`.
"""
import asyncio
import logging
from typing import Any, Dict, List

from bson import ObjectId

from app.core.config import settings
from app.core.logging import setup_logging
from app.core.time import now_iso
from app.infrastructure.db.bootstrap import ensure_collections
from app.infrastructure.db.mongo_async import close_async_db, get_async_db
from app.infrastructure.security.password import hash_password
from app.repositories.folder_repo import folders
from app.repositories.note_repo import notes
from app.repositories.tag_repo import tags
from app.repositories.user_repo import COLLECTION as USER_COLL

_log = logging.getLogger("noteful.seed")

SEED_PASSWORD = "password123"

USERS: List[Dict[str, Any]] = [
    {"_id": ObjectId("333333333333333333333300"), "username": "bobuser", "fullname": "Bob User"},
    {"_id": ObjectId("333333333333333333333301"), "username": "alicia", "fullname": "Alicia Gómez"},
]

# (owner index, folder name)
FOLDERS = [(0, "Archive"), (0, "Drafts"), (0, "Personal"), (0, "Work"), (1, "Recetas")]
TAGS = [(0, "foo"), (0, "bar"), (0, "baz"), (0, "qux"), (1, "cocina")]

# (owner, title, content, folder index in FOLDERS or None, tag indexes in TAGS)
NOTES = [
    (0, "5 life lessons learned from cats", "Lorem ipsum dolor sit amet.", 0, [0, 1]),
    (0, "What the government doesn't want you to know about cats", "Posuere sollicitudin aliquam.", 1, [1]),
    (0, "The most boring article about cats you'll ever read", "Facilisis gravida neque.", 2, []),
    (0, "7 things lady gaga has in common with cats", "Vitae justo eget magna.", None, [2, 3]),
    (1, "Tortilla de patatas", "Huevos, patatas, cebolla.", 4, [4]),
]


def _docs() -> Dict[str, List[Dict[str, Any]]]:
    now = now_iso()
    pw = hash_password(SEED_PASSWORD)
    users = [{**u, "passwordHash": pw, "createdAt": now, "updatedAt": now} for u in USERS]

    def owned(owner: int, **fields: Any) -> Dict[str, Any]:
        return {"_id": ObjectId(), "userId": str(USERS[owner]["_id"]), "createdAt": now, "updatedAt": now, **fields}

    folder_docs = [owned(o, name=n) for o, n in FOLDERS]
    tag_docs = [owned(o, name=n) for o, n in TAGS]
    note_docs = []
    for o, title, content, f, ts in NOTES:
        doc = owned(o, title=title, content=content, tagIds=[str(tag_docs[t]["_id"]) for t in ts])
        if f is not None:
            doc["folderId"] = str(folder_docs[f]["_id"])
        note_docs.append(doc)
    return {USER_COLL: users, folders.collection: folder_docs, tags.collection: tag_docs, notes.collection: note_docs}


async def seed() -> Dict[str, int]:
    db = get_async_db()
    data = _docs()
    # Limpia colecciones objetivo (idempotente para demo)
    for name in data:
        await db[name].delete_many({})
    for name, docs in data.items():
        if docs:
            await db[name].insert_many(docs)
    await ensure_collections()
    return {name: await db[name].count_documents({}) for name in data}


def main() -> None:
    setup_logging(settings.log_level)
    _log.info("Sembrando %s en %s", settings.mongo_db, settings.mongo_uri)
    try:
        counts = asyncio.run(seed())
    finally:
        close_async_db()
    for name, n in counts.items():
        _log.info("  %s: %s", name, n)


if __name__ == "__main__":
    main()
