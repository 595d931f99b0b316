"""
Endpoints de tags: CRUD, filtro por nombre y aislamiento entre usuarios.
"""
import pytest

TAG_KEYS = {"id", "name", "userId", "createdAt", "updatedAt"}


async def _create(client, user, name):
    res = await client.post("/api/tags", json={"name": name}, headers=user["headers"])
    assert res.status_code == 201, res.text
    return res.json()


class TestTagCrud:

    @pytest.mark.asyncio
    async def test_create_and_get_round_trip(self, client, bob):
        res = await client.post("/api/tags", json={"name": "foo"}, headers=bob["headers"])
        assert res.status_code == 201
        created = res.json()
        assert set(created) == TAG_KEYS
        assert res.headers["location"] == f"/api/tags/{created['id']}"
        res = await client.get(f"/api/tags/{created['id']}", headers=bob["headers"])
        assert res.json() == created

    @pytest.mark.asyncio
    async def test_list_sorted_and_filtered(self, client, bob):
        for name in ("qux", "bar", "baz", "foo"):
            await _create(client, bob, name)
        res = await client.get("/api/tags", headers=bob["headers"])
        assert [t["name"] for t in res.json()] == ["bar", "baz", "foo", "qux"]
        res = await client.get("/api/tags", params={"name": "BA"}, headers=bob["headers"])
        assert [t["name"] for t in res.json()] == ["bar", "baz"]

    @pytest.mark.asyncio
    async def test_duplicate_name(self, client, bob):
        await _create(client, bob, "foo")
        res = await client.post("/api/tags", json={"name": "foo"}, headers=bob["headers"])
        assert res.status_code == 400

    @pytest.mark.asyncio
    async def test_update_and_partial_body(self, client, bob):
        tag = await _create(client, bob, "foo")
        res = await client.put(f"/api/tags/{tag['id']}", json={}, headers=bob["headers"])
        assert res.status_code == 200
        assert res.json()["name"] == "foo"
        res = await client.put(f"/api/tags/{tag['id']}", json={"name": "renamed"}, headers=bob["headers"])
        assert res.json()["name"] == "renamed"

    @pytest.mark.asyncio
    async def test_update_with_blank_name(self, client, bob):
        tag = await _create(client, bob, "foo")
        res = await client.put(f"/api/tags/{tag['id']}", json={"name": None}, headers=bob["headers"])
        assert res.status_code == 422

    @pytest.mark.asyncio
    async def test_delete_then_get(self, client, bob):
        tag = await _create(client, bob, "foo")
        res = await client.delete(f"/api/tags/{tag['id']}", headers=bob["headers"])
        assert res.status_code == 204
        res = await client.get(f"/api/tags/{tag['id']}", headers=bob["headers"])
        assert res.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_pulls_tag_from_notes(self, client, bob):
        foo = await _create(client, bob, "foo")
        bar = await _create(client, bob, "bar")
        res = await client.post(
            "/api/notes", json={"title": "tagged", "tagIds": [foo["id"], bar["id"]]}, headers=bob["headers"]
        )
        note = res.json()
        await client.delete(f"/api/tags/{foo['id']}", headers=bob["headers"])
        res = await client.get(f"/api/notes/{note['id']}", headers=bob["headers"])
        assert res.json()["tagIds"] == [bar["id"]]


class TestTagIsolation:

    @pytest.mark.asyncio
    async def test_cross_user_access_is_not_found(self, client, bob, alice):
        tag = await _create(client, bob, "secret")
        for method, kwargs in (("GET", {}), ("PUT", {"json": {"name": "x"}})):
            res = await client.request(method, f"/api/tags/{tag['id']}", headers=alice["headers"], **kwargs)
            assert res.status_code == 404
        await client.delete(f"/api/tags/{tag['id']}", headers=alice["headers"])
        res = await client.get(f"/api/tags/{tag['id']}", headers=bob["headers"])
        assert res.status_code == 200
        assert res.json()["name"] == "secret"
