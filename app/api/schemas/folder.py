"""Esquemas Pydantic para `folder`."""
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class FolderCreate(BaseModel):
    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def _strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class FolderUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)

    @field_validator("name")
    @classmethod
    def _strip(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v is not None else v


class FolderOut(BaseModel):
    id: str
    name: str
    userId: str
    createdAt: str
    updatedAt: str
