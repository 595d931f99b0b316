"""
Login, refresh y validación del Bearer token en endpoints protegidos.
"""
import pytest

from app.infrastructure.security.token_service import create_access_token, verify_access_token
from tests.conftest import PASSWORD


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_returns_token_for_user(self, client, bob):
        res = await client.post("/api/login", json={"username": "bobuser", "password": PASSWORD})
        assert res.status_code == 200
        payload = verify_access_token(res.json()["authToken"])
        assert payload["sub"] == bob["id"]
        assert payload["username"] == "bobuser"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,password", [("bobuser", "wrongpassword"), ("nobody", PASSWORD)])
    async def test_bad_credentials(self, client, bob, username, password):
        res = await client.post("/api/login", json={"username": username, "password": password})
        assert res.status_code == 401
        assert res.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_login_token_works_on_protected_routes(self, client, bob):
        res = await client.post("/api/login", json={"username": "bobuser", "password": PASSWORD})
        token = res.json()["authToken"]
        res = await client.get("/api/folders", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 200

    @pytest.mark.asyncio
    async def test_refresh_issues_new_token(self, client, bob):
        res = await client.post("/api/refresh", headers=bob["headers"])
        assert res.status_code == 200
        token = res.json()["authToken"]
        assert verify_access_token(token)["sub"] == bob["id"]


class TestBearerToken:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/folders", "/api/tags", "/api/notes"])
    async def test_missing_token(self, client, path):
        res = await client.get(path)
        assert res.status_code == 401

    @pytest.mark.asyncio
    async def test_wrong_scheme(self, client, bob):
        token = bob["headers"]["Authorization"].split(" ", 1)[1]
        res = await client.get("/api/notes", headers={"Authorization": f"Basic {token}"})
        assert res.status_code == 401

    @pytest.mark.asyncio
    async def test_garbage_token(self, client, bob):
        res = await client.get("/api/notes", headers={"Authorization": "Bearer not.a.jwt"})
        assert res.status_code == 401

    @pytest.mark.asyncio
    async def test_expired_token(self, client, bob):
        import jwt
        from app.core.config import settings

        token = jwt.encode(
            {"sub": bob["id"], "iat": 1_700_000_000, "exp": 1_700_000_300},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        res = await client.get("/api/notes", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401
        assert res.json()["message"] == "Invalid or expired token"

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret(self, client, bob):
        import jwt

        token = jwt.encode({"sub": bob["id"], "exp": 9999999999}, "some-other-secret-key-of-enough-length", algorithm="HS256")
        res = await client.get("/api/notes", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, client, db):
        token = create_access_token(user={"_id": "65f000000000000000000000", "username": "ghost"})
        res = await client.get("/api/notes", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401


class TestLoginRateLimit:

    @pytest.mark.asyncio
    async def test_too_many_attempts(self, client, bob, monkeypatch):
        from app.core.config import settings

        monkeypatch.setattr(settings, "login_rate_per_min", 2)
        for _ in range(2):
            res = await client.post("/api/login", json={"username": "bobuser", "password": "wrongpassword"})
            assert res.status_code == 401
        res = await client.post("/api/login", json={"username": "bobuser", "password": PASSWORD})
        assert res.status_code == 429
