"""
Dependencias reutilizables para routers (FastAPI Depends).

- Autenticación: extrae y valida el Bearer token, devuelve el usuario actual.
- Mantener esta capa delgada: sin lógica de negocio.
"""
from typing import Optional, Dict, Any
from fastapi import Header

from app.core.exceptions import AuthError
from app.infrastructure.security.token_service import InvalidTokenError, verify_access_token
from app.repositories import user_repo as repo


async def get_current_user(authorization: Optional[str] = Header(default=None)) -> Dict[str, Any]:
    """Principal de la petición (documento público del usuario)."""
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthError("Missing bearer token")
    token = authorization.split(" ", 1)[1].strip()
    try:
        payload = verify_access_token(token)
    except InvalidTokenError:
        raise AuthError("Invalid or expired token")

    user_id = payload.get("sub")
    if not user_id:
        raise AuthError("Invalid or expired token")

    u = await repo.get_user_by_id(user_id)
    if not u:
        raise AuthError("User not found")
    return u


def user_id_of(user: Dict[str, Any]) -> str:
    return str(user["_id"])
