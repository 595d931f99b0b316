"""
Fixtures compartidas de pytest.

- `db`: base Mongo en memoria (mongomock-motor) instalada como DB activa.
- `client`: httpx AsyncClient contra la app vía ASGITransport (sin servidor).
- `bob` / `alice`: dos usuarios registrados por la API, con headers Bearer.
"""
import os

# Antes de importar la app: configuración de test
os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_PREFIX"] = "/api"
os.environ["MONGO_DB"] = "noteful_test"

from typing import Any, Dict

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.core import rate_limit
from app.infrastructure.db import mongo_async
from app.infrastructure.db.bootstrap import ensure_collections
from app.infrastructure.security.token_service import create_access_token

PASSWORD = "password123"


@pytest_asyncio.fixture
async def db():
    database = AsyncMongoMockClient()["noteful_test"]
    mongo_async.set_async_db(database)
    rate_limit.reset()
    await ensure_collections()
    yield database
    mongo_async.set_async_db(None)


@pytest_asyncio.fixture
async def client(db):
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def register(client: AsyncClient, username: str, password: str = PASSWORD, fullname: str = "") -> Dict[str, Any]:
    """Registra por la API y devuelve el usuario con `headers` de autenticación."""
    res = await client.post("/api/users", json={"username": username, "password": password, "fullname": fullname})
    assert res.status_code == 201, res.text
    user = res.json()
    token = create_access_token(user=user)
    user["headers"] = {"Authorization": f"Bearer {token}"}
    return user


@pytest_asyncio.fixture
async def bob(client):
    return await register(client, "bobuser", fullname="Bob User")


@pytest_asyncio.fixture
async def alice(client):
    return await register(client, "alicia", fullname="Alicia Gómez")
