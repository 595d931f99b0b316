"""Cliente MongoDB asíncrono (Motor).

Un único cliente por proceso, creado de forma lazy en el primer uso.
Los repositorios piden la base con `get_async_db()`; nunca los routers.
"""
from __future__ import annotations

import certifi
import logging
from typing import Optional

from app.core.config import settings
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

_log = logging.getLogger("noteful.mongo")

_aclient: Optional[AsyncIOMotorClient] = None
_adb: Optional[AsyncIOMotorDatabase] = None


def _build_async_client() -> AsyncIOMotorClient:
    uri = settings.mongo_uri
    kwargs = dict(serverSelectionTimeoutMS=15000, tz_aware=True)
    # SRV ya implica TLS; proveemos CA bundle para robustez
    if uri.startswith("mongodb+srv://"):
        kwargs["tlsCAFile"] = certifi.where()
    elif settings.mongo_tls:
        kwargs["tls"] = True
        kwargs["tlsCAFile"] = certifi.where()
        if settings.mongo_tls_insecure:
            kwargs["tlsAllowInvalidCertificates"] = True
        if settings.mongo_tls_allow_invalid_hostnames:
            kwargs["tlsAllowInvalidHostnames"] = True
    return AsyncIOMotorClient(uri, **kwargs)


def get_async_db() -> AsyncIOMotorDatabase:
    """Devuelve la DB asíncrona; inicializa lazy un único cliente/bd."""
    global _aclient, _adb
    if _adb is None:
        _aclient = _aclient or _build_async_client()
        _adb = _aclient[settings.mongo_db]
        _log.info("Motor listo (db=%s)", settings.mongo_db)
    return _adb


def set_async_db(db: Optional[AsyncIOMotorDatabase]) -> None:
    """Sustituye la DB activa (scripts y tests con un cliente propio)."""
    global _adb
    _adb = db


async def ping() -> bool:
    try:
        await get_async_db().command("ping")
        return True
    except Exception as e:
        _log.warning("Mongo no accesible: %s", e)
        return False


def close_async_db() -> None:
    global _aclient, _adb
    if _aclient is not None:
        _aclient.close()
        _log.info("Motor cerrado")
    _aclient = None
    _adb = None
