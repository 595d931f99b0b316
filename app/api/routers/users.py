"""Registro de usuarios (único endpoint sin autenticación junto a login)."""
from typing import Any
from fastapi import APIRouter, Body, Response, status

from app.api.schemas.user import UserOut
from app.core.config import settings
from app.services import auth_service as service

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
    summary="Registrar usuario",
    description="Valida username/password, guarda el hash y devuelve el usuario sin credenciales.",
)
async def register(response: Response, payload: Any = Body(default=None)) -> UserOut:
    user = await service.register_user(payload)
    response.headers["Location"] = f"{settings.api_prefix_normalized}/users/{user['id']}"
    return UserOut(**user)
