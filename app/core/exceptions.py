"""
Errores de dominio y handlers globales para respuestas de error consistentes.

Cada error de la app lleva su status HTTP; los routers sólo dejan que suban.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppError(Exception):
    """Base de todos los errores de la aplicación."""
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Payload inválido o referencias (folder/tags) que no pertenecen al usuario."""
    status_code = 422
    default_message = "Validation error"


class AuthError(AppError):
    """Token ausente, inválido o expirado; credenciales incorrectas."""
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(AppError):
    """Recurso inexistente o de otro usuario (no se distinguen)."""
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    """Clave única duplicada (username, nombre de folder/tag)."""
    status_code = 400
    default_message = "Resource already exists"


class InternalError(AppError):
    status_code = 500


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _body(message: Any, request: Request, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message, **extra}
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("noteful.errors")

    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
        if exc.status_code >= 500:
            log.error("App error request_id=%s: %s", _req_id(request), exc.message)
        return JSONResponse(status_code=exc.status_code, content=_body(exc.message, request), headers=headers)

    @app.exception_handler(PyMongoError)
    async def _store_error_handler(request: Request, exc: PyMongoError):
        log.error("Store error request_id=%s: %s", _req_id(request), exc)
        return await _app_error_handler(request, InternalError("Database error"))

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_body(exc.detail or "HTTP error", request),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{loc}: {first.get('msg')}" if loc else "Validation error"
        return JSONResponse(status_code=422, content=_body(message, request, errors=jsonable_errors(errors)))

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        log.exception("Unhandled error request_id=%s", _req_id(request))
        return JSONResponse(status_code=500, content=_body("Internal server error", request))


def jsonable_errors(errors: list) -> list:
    """Quita `ctx`/`input` de los errores de pydantic (pueden no ser serializables)."""
    return [{k: v for k, v in e.items() if k not in ("ctx", "input", "url")} for e in errors]
