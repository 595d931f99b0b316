"""
Lógica de autenticación: registro, login, refresh y borrado de cuentas.
"""
import logging
import re
from typing import Any, Dict

from pymongo.errors import DuplicateKeyError

from app.core.exceptions import AuthError, ConflictError, ValidationError
from app.infrastructure.security.password import hash_password, verify_password
from app.infrastructure.security.token_service import create_access_token
from app.repositories import user_repo as repo
from app.repositories.folder_repo import folders
from app.repositories.note_repo import notes
from app.repositories.tag_repo import tags

_log = logging.getLogger("noteful.auth")

REQUIRED_FIELDS = ("username", "password")
PASSWORD_MIN = 8
PASSWORD_MAX = 72
_WS = re.compile(r"\s")


def validate_registration(payload: Any) -> Dict[str, Any]:
    """Valida el body de registro antes de tocar la base.

    Devuelve `{username, password, fullname}` o lanza `ValidationError`.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    missing = next((f for f in REQUIRED_FIELDS if f not in payload), None)
    if missing:
        raise ValidationError(f"Missing '{missing}' in request body")

    username = payload["username"]
    password = payload["password"]
    fullname = payload.get("fullname")
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError("Request body needs to be of type String.")
    if fullname is not None and not isinstance(fullname, str):
        raise ValidationError("Field 'fullname' needs to be of type String.")
    if _WS.search(username) or _WS.search(password):
        raise ValidationError("User and password must not contain spaces.")
    if len(username) < 1:
        raise ValidationError("Username must be at least 1 character.")
    if len(password) < PASSWORD_MIN or len(password) > PASSWORD_MAX:
        raise ValidationError(f"Password must be between {PASSWORD_MIN} and {PASSWORD_MAX} characters.")

    return {"username": username, "password": password, "fullname": (fullname or "").strip()}


async def register_user(payload: Any) -> Dict[str, Any]:
    data = validate_registration(payload)
    digest = hash_password(data["password"])
    try:
        user = await repo.insert_user(
            {"username": data["username"], "passwordHash": digest, "fullname": data["fullname"]}
        )
    except DuplicateKeyError:
        raise ConflictError("The username already exists")
    _log.info("Usuario registrado id=%s", user["id"])
    return user


async def login(username: Any, password: Any) -> str:
    """Devuelve un access token si las credenciales son válidas."""
    if not isinstance(username, str) or not isinstance(password, str):
        raise AuthError("Incorrect username or password")
    u = await repo.find_user_by_username(username)
    if not u or not verify_password(password, u.get("passwordHash") or ""):
        raise AuthError("Incorrect username or password")
    return create_access_token(user=u)


def refresh(user: Dict[str, Any]) -> str:
    return create_access_token(user=user)


async def delete_account(user_id: str) -> Dict[str, int]:
    """Borrado administrativo: elimina el usuario y todos sus recursos."""
    removed = {
        "notes": await notes.delete_all(user_id),
        "folders": await folders.delete_all(user_id),
        "tags": await tags.delete_all(user_id),
        "user": int(await repo.delete_user(user_id)),
    }
    _log.info("Cuenta eliminada id=%s %s", user_id, removed)
    return removed
