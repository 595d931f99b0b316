"""Repo de la colección `folder`."""
from app.repositories.owned_repo import OwnedRepository

COLLECTION = "folder"

folders = OwnedRepository(COLLECTION, sort_field="name", search_fields=("name",))
