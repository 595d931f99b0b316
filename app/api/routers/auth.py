"""Rutas de autenticación: login y refresh del access token."""
from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.deps import get_current_user
from app.api.schemas.auth import LoginPayload, TokenOut
from app.core import rate_limit
from app.core.config import settings
from app.services import auth_service as service

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=TokenOut,
    summary="Login local",
    description="Valida username/password y emite un access token.",
)
async def login(payload: LoginPayload, request: Request) -> TokenOut:
    # Rate limit por IP
    ip = request.client.host if request.client else ""
    if not rate_limit.allow(ip, limit=settings.login_rate_per_min):
        raise HTTPException(status_code=429, detail="Too many login attempts, try again later")
    token = await service.login(payload.username, payload.password)
    return TokenOut(authToken=token)


@router.post(
    "/refresh",
    response_model=TokenOut,
    summary="Renovar access token",
    description="Emite un token nuevo para el usuario del token actual.",
)
async def refresh(user: Dict[str, Any] = Depends(get_current_user)) -> TokenOut:
    return TokenOut(authToken=service.refresh(user))
