"""Repo de la colección `note`.

Además del CRUD genérico, limpia referencias cuando se borra un folder o tag.
`folderId`/`tagIds` se guardan en forma canónica (`canonical_id`), así que los
filtros y la limpieza normalizan el id recibido antes de comparar.
"""
from typing import Any, Dict, List, Optional

from app.repositories.owned_repo import OwnedRepository, canonical_id

COLLECTION = "note"


def _ref(value: str) -> str:
    # Un id inválido se compara tal cual: no coincide con ninguna referencia
    return canonical_id(value) or value


class NoteRepository(OwnedRepository):

    async def list_notes(
        self,
        user_id: str,
        search_term: Optional[str] = None,
        title: Optional[str] = None,
        folder_id: Optional[str] = None,
        tag_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Lista notas del usuario con filtros opcionales (ordenadas por título)."""
        filters: Dict[str, Any] = {}
        if folder_id:
            filters["folderId"] = _ref(folder_id)
        if tag_id:
            filters["tagIds"] = _ref(tag_id)
        if title:
            filters.update(self._search(title, ("title",)))
        return await self.list(user_id, search=search_term, filters=filters)

    async def detach_folder(self, user_id: str, folder_id: str) -> int:
        """Quita `folderId` de las notas del usuario que apuntan al folder."""
        ref = _ref(folder_id)
        return await self.update_where(user_id, {"folderId": ref}, {"$unset": {"folderId": ""}})

    async def detach_tag(self, user_id: str, tag_id: str) -> int:
        """Saca el tag de `tagIds` en las notas del usuario."""
        ref = _ref(tag_id)
        return await self.update_where(user_id, {"tagIds": ref}, {"$pull": {"tagIds": ref}})


notes = NoteRepository(COLLECTION, sort_field="title", search_fields=("title", "content"))
