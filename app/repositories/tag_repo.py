"""Repo de la colección `tag`."""
from app.repositories.owned_repo import OwnedRepository

COLLECTION = "tag"

tags = OwnedRepository(COLLECTION, sort_field="name", search_fields=("name",))
