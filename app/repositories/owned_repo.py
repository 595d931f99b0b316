"""Repositorio genérico para colecciones con dueño (`folder`, `tag`, `note`).

- Todo filtro pasa por `scoped()`: es el único sitio donde se añade `userId`.
- Un documento de otro usuario se comporta igual que uno inexistente (None).
- `userId`, `_id` y timestamps los pone el servidor; nunca se toman del input.
- Los documentos salen con `id` (str) en lugar de `_id`.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument

from app.core.time import now_iso
from app.infrastructure.db.mongo_async import get_async_db

# Campos que sólo asigna el servidor
SERVER_FIELDS = frozenset({"_id", "id", "userId", "createdAt", "updatedAt"})


def to_object_id(value: Any) -> Optional[ObjectId]:
    """ObjectId a partir de un str; None si no es un id válido."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def canonical_id(value: Any) -> Optional[str]:
    """Forma única (hex en minúsculas) con la que se guardan las referencias."""
    oid = to_object_id(value)
    return str(oid) if oid is not None else None


def scoped(user_id: str, query: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Añade el predicado de propietario a un filtro."""
    if not user_id:
        raise ValueError("user_id requerido para acceder a recursos con dueño")
    filtro = dict(query or {})
    filtro["userId"] = str(user_id)
    return filtro


def _out(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    d = dict(doc)
    d["id"] = str(d.pop("_id", ""))
    return d


def _clean(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in (fields or {}).items() if k not in SERVER_FIELDS}


class OwnedRepository:
    """CRUD de una colección filtrada siempre por `userId`."""

    def __init__(self, collection: str, sort_field: str, search_fields: Iterable[str]):
        self.collection = collection
        self.sort_field = sort_field
        self.search_fields = tuple(search_fields)

    def _coll(self):
        return get_async_db()[self.collection]

    def _search(self, term: str, fields: Iterable[str] | None = None) -> Dict[str, Any]:
        rx = {"$regex": re.escape(term), "$options": "i"}
        ors = [{f: rx} for f in (fields or self.search_fields)]
        return ors[0] if len(ors) == 1 else {"$or": ors}

    async def list(
        self,
        user_id: str,
        search: Optional[str] = None,
        filters: Optional[Dict[str, Any]] = None,
        search_fields: Iterable[str] | None = None,
    ) -> List[Dict[str, Any]]:
        """Lista del usuario ordenada por el campo visible (y `_id` para desempatar)."""
        query: Dict[str, Any] = dict(filters or {})
        if search:
            query.update(self._search(search, search_fields))
        cursor = self._coll().find(
            scoped(user_id, query), sort=[(self.sort_field, ASCENDING), ("_id", ASCENDING)]
        )
        return [_out(d) for d in await cursor.to_list(length=None)]

    async def get(self, user_id: str, doc_id: str) -> Optional[Dict[str, Any]]:
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        return _out(await self._coll().find_one(scoped(user_id, {"_id": oid})))

    async def count_existing(self, user_id: str, doc_ids: Iterable[str]) -> int:
        """Cuántos de los ids existen y son del usuario (ids inválidos no cuentan)."""
        oids = [to_object_id(i) for i in doc_ids]
        if not oids or any(o is None for o in oids):
            return 0
        return await self._coll().count_documents(scoped(user_id, {"_id": {"$in": list(set(oids))}}))

    async def create(self, user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        now = now_iso()
        data = _clean(fields)
        data["userId"] = str(user_id)
        data["createdAt"] = now
        data["updatedAt"] = now
        res = await self._coll().insert_one(data)
        data["_id"] = res.inserted_id
        return _out(data)

    async def update(
        self,
        user_id: str,
        doc_id: str,
        set_fields: Dict[str, Any],
        unset_fields: Iterable[str] = (),
    ) -> Optional[Dict[str, Any]]:
        """Actualización parcial; sólo cambian los campos dados. None si no existe."""
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        update: Dict[str, Any] = {"$set": {**_clean(set_fields), "updatedAt": now_iso()}}
        unset = [f for f in unset_fields if f not in SERVER_FIELDS]
        if unset:
            update["$unset"] = {f: "" for f in unset}
        doc = await self._coll().find_one_and_update(
            scoped(user_id, {"_id": oid}),
            update,
            return_document=ReturnDocument.AFTER,
        )
        return _out(doc)

    async def update_where(self, user_id: str, query: Dict[str, Any], update: Dict[str, Any]) -> int:
        """Actualización masiva dentro de los documentos del usuario."""
        ops = dict(update)
        ops["$set"] = {**ops.get("$set", {}), "updatedAt": now_iso()}
        res = await self._coll().update_many(scoped(user_id, query), ops)
        return res.modified_count

    async def delete(self, user_id: str, doc_id: str) -> bool:
        oid = to_object_id(doc_id)
        if oid is None:
            return False
        res = await self._coll().delete_one(scoped(user_id, {"_id": oid}))
        return res.deleted_count > 0

    async def delete_all(self, user_id: str) -> int:
        res = await self._coll().delete_many(scoped(user_id))
        return res.deleted_count
