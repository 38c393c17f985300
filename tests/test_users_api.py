"""Tests for admin user management."""
import pytest
from fastapi import HTTPException
from pymongo.errors import DuplicateKeyError

from app.database.store import InMemoryEntityStore
from app.models.user.user import User, UserUpdate
from app.services.auth.auth_utils import verify_password
from app.services.user_management.user_helper import create_user_helper, update_user_helper

NEW_USER = {"name": "Priya Sharma", "email": "Priya.Sharma@seci.co.in", "password": "priya123"}


async def test_create_user_hashes_password_and_defaults_role(client, admin_headers, user_store):
    resp = await client.post("/api/users", headers=admin_headers, json=NEW_USER)
    assert resp.status_code == 201
    body = resp.json()
    assert body["email"] == "priya.sharma@seci.co.in"
    assert body["role"] == "user"
    assert "password" not in body

    stored = await user_store.get(body["_id"])
    assert stored["password"] != "priya123"
    assert verify_password("priya123", stored["password"])


async def test_duplicate_email_is_case_insensitive(client, admin_headers):
    assert (await client.post("/api/users", headers=admin_headers, json=NEW_USER)).status_code == 201
    dup = {**NEW_USER, "email": "PRIYA.SHARMA@SECI.CO.IN"}
    resp = await client.post("/api/users", headers=admin_headers, json=dup)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "User with this email already exists"


async def test_create_user_validation(client, admin_headers):
    for payload in ({**NEW_USER, "password": "123"}, {**NEW_USER, "email": "not-an-email"}, {**NEW_USER, "role": "root"}):
        assert (await client.post("/api/users", headers=admin_headers, json=payload)).status_code == 422


async def test_list_users_never_exposes_passwords(client, admin_headers, viewer_user):
    resp = await client.get("/api/users", headers=admin_headers, params={"search": "example.com", "sortBy": "name"})
    body = resp.json()
    assert resp.status_code == 200
    assert body["total"] == 2
    assert [u["name"] for u in body["users"]] == ["Admin User", "Regular User"]
    assert all("password" not in u for u in body["users"])


async def test_list_users_by_role(client, admin_headers, viewer_user):
    body = (await client.get("/api/users", headers=admin_headers, params={"role": "user"})).json()
    assert [u["email"] for u in body["users"]] == ["user@example.com"]


async def test_list_users_rejects_unknown_sort(client, admin_headers):
    resp = await client.get("/api/users", headers=admin_headers, params={"sortBy": "password"})
    assert resp.status_code == 400


async def test_update_user_rehashes_password(client, admin_headers, viewer_user, user_store):
    resp = await client.put(f"/api/users/{viewer_user['_id']}", headers=admin_headers, json={"password": "newpass1", "role": "admin"})
    assert resp.status_code == 200
    assert resp.json()["role"] == "admin"

    stored = await user_store.get(viewer_user["_id"])
    assert verify_password("newpass1", stored["password"])

    login = await client.post("/api/auth/login", json={"email": "user@example.com", "password": "newpass1"})
    assert login.status_code == 200


async def test_update_user_email_conflict(client, admin_headers, admin_user, viewer_user):
    resp = await client.put(f"/api/users/{viewer_user['_id']}", headers=admin_headers, json={"email": "ADMIN@example.com"})
    assert resp.status_code == 400

    same = await client.put(f"/api/users/{viewer_user['_id']}", headers=admin_headers, json={"email": "USER@example.com"})
    assert same.status_code == 200


async def test_user_not_found(client, admin_headers):
    assert (await client.get("/api/users/missing", headers=admin_headers)).status_code == 404
    assert (await client.put("/api/users/missing", headers=admin_headers, json={"name": "x"})).status_code == 404
    assert (await client.delete("/api/users/missing", headers=admin_headers)).status_code == 404


async def test_delete_user(client, admin_headers, viewer_user):
    resp = await client.delete(f"/api/users/{viewer_user['_id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert (await client.get(f"/api/users/{viewer_user['_id']}", headers=admin_headers)).status_code == 404


class RacingUserStore(InMemoryEntityStore):
    """Lookups miss, but writes still enforce the unique email index."""

    async def find_one(self, field, value):
        return None

    async def _check_unique(self, email, record_id=None):
        existing = await super().find_one("email", email)
        if existing and existing["_id"] != record_id:
            raise DuplicateKeyError("E11000 duplicate key error collection: users index: uniq_user_email")

    async def create(self, record):
        await self._check_unique(record.get("email"))
        return await super().create(record)

    async def update(self, record_id, fields):
        if "email" in fields:
            await self._check_unique(fields["email"], record_id)
        return await super().update(record_id, fields)


async def test_concurrent_duplicate_create_is_400():
    store = RacingUserStore()
    await create_user_helper(store, User(**NEW_USER))

    with pytest.raises(HTTPException) as exc:
        await create_user_helper(store, User(**{**NEW_USER, "name": "Someone Else"}))
    assert exc.value.status_code == 400
    assert exc.value.detail == "User with this email already exists"
    assert len(await store.list()) == 1


async def test_concurrent_duplicate_update_is_400():
    store = RacingUserStore()
    await create_user_helper(store, User(**NEW_USER))
    other = await create_user_helper(store, User(name="Arjun Rao", email="arjun@ntpc.co.in", password="arjun123"))

    with pytest.raises(HTTPException) as exc:
        await update_user_helper(store, other.id, UserUpdate(email=NEW_USER["email"]))
    assert exc.value.status_code == 400
    assert exc.value.detail == "User with this email already exists"
    assert (await store.get(other.id))["email"] == "arjun@ntpc.co.in"
