"""
Esquemas Pydantic para `note`.

`folderId`/`tagIds` sólo se validan en forma aquí; que existan y sean del
usuario lo comprueba `integrity_service` antes de escribir.
"""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class NoteCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str = ""
    folderId: Optional[str] = None
    tagIds: List[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class NoteUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    folderId: Optional[str] = None
    tagIds: Optional[List[str]] = None

    @field_validator("title")
    @classmethod
    def _strip_title(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v is not None else v


class NoteOut(BaseModel):
    id: str
    title: str
    content: str = ""
    userId: str
    folderId: Optional[str] = None
    tagIds: List[str] = Field(default_factory=list)
    createdAt: str
    updatedAt: str
