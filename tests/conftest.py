"""Pytest configuration and fixtures."""
import os
from datetime import datetime, timedelta, timezone

# Must be set before config/logging are imported
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"
os.environ["JWT_REFRESH_SECRET_KEY"] = "test-jwt-refresh-secret"
os.environ["JWT_ALGORITHM"] = "HS256"

import pytest
from httpx import ASGITransport, AsyncClient

from app.database.store import InMemoryEntityStore, get_project_store, get_user_store
from app.models.auth.auth import AuthUser
from app.models.user.user import Role
from app.services.auth.auth_utils import create_access_token, hash_password
from main import app

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_project(name, energy_type="solar", capacity=10, location="Rajasthan, India",
                 status="operational", owner="Owner", year=2020, created_offset=0, _id=None):
    """Plain project record as the store hands it to the query layer."""
    return {
        "_id": _id or name,
        "name": name,
        "owner": owner,
        "energy_type": energy_type,
        "capacity": capacity,
        "location": location,
        "status": status,
        "year": year,
        "latitude": None,
        "longitude": None,
        "created_at": BASE_TIME + timedelta(minutes=created_offset),
    }


@pytest.fixture
def project_store():
    return InMemoryEntityStore()


@pytest.fixture
def user_store():
    return InMemoryEntityStore()


@pytest.fixture
async def admin_user(user_store):
    return await user_store.create({
        "name": "Admin User",
        "email": "admin@example.com",
        "password": hash_password("admin123"),
        "role": "admin",
    })


@pytest.fixture
async def viewer_user(user_store):
    return await user_store.create({
        "name": "Regular User",
        "email": "user@example.com",
        "password": hash_password("user123"),
        "role": "user",
    })


def _bearer(doc):
    token = create_access_token(AuthUser(id=doc["_id"], email=doc["email"], name=doc["name"], role=Role(doc["role"])))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user):
    return _bearer(admin_user)


@pytest.fixture
def viewer_headers(viewer_user):
    return _bearer(viewer_user)


@pytest.fixture
async def client(project_store, user_store):
    """API client wired to isolated in-memory stores."""
    app.dependency_overrides[get_project_store] = lambda: project_store
    app.dependency_overrides[get_user_store] = lambda: user_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
