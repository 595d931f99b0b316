"""Esquemas Pydantic para `user` (vista pública, sin hash)."""
from pydantic import BaseModel


class UserOut(BaseModel):
    id: str
    username: str
    fullname: str = ""
    createdAt: str
    updatedAt: str
