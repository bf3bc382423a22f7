# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - In-memory stand-ins for the Redis client and the users collection
# - A TestClient wired to those stand-ins through dependency_overrides
#   (the lifespan is never entered, so no real servers are contacted)
# =============================================================================

import os
from pathlib import Path
from types import SimpleNamespace
from typing import Any

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

PROJECT_ROOT = Path(__file__).resolve().parent.parent

os.environ.setdefault("TEMPLATES_DIR", str(PROJECT_ROOT / "templates"))
os.environ.setdefault("ASSETS_DIR", str(PROJECT_ROOT / "assets"))
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("APP_TITLE", "Test starter")

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError
from redis.exceptions import ConnectionError as RedisConnectionError


# =============================================================================
# Fakes
# =============================================================================

class FakeRedis:
    """Dict-backed async Redis with switchable failures."""

    def __init__(self):
        self.store: dict[str, str] = {}
        self.fail_get = False
        self.fail_set = False
        self.fail_ping = False

    async def get(self, key: str) -> str | None:
        if self.fail_get:
            raise RedisConnectionError("redis down")
        return self.store.get(key)

    async def set(self, key: str, value: str) -> bool:
        if self.fail_set:
            raise RedisConnectionError("redis down")
        self.store[key] = value
        return True

    async def ping(self) -> bool:
        if self.fail_ping:
            raise RedisConnectionError("redis down")
        return True


class FakeCursor:
    """Async iterator over a snapshot of documents."""

    def __init__(self, documents: list[dict[str, Any]], fail_after: int | None = None):
        self._documents = documents
        self._fail_after = fail_after

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for index, document in enumerate(self._documents):
            if self._fail_after is not None and index >= self._fail_after:
                raise ServerSelectionTimeoutError("cursor lost")
            yield dict(document)


def _matches(document: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCollection:
    """
    In-memory users collection.

    Supports the equality filters and the $set update used by UserService.
    Set `fail` to make every operation raise a driver error, or
    `fail_on` to fail only the named operations.
    """

    name = "users"

    def __init__(self):
        self.documents: list[dict[str, Any]] = []
        self.fail = False
        self.fail_on: set[str] = set()
        self.cursor_fail_after: int | None = None
        self.find_kwargs: dict[str, Any] = {}

    def _check(self, operation: str) -> None:
        if self.fail or operation in self.fail_on:
            raise ServerSelectionTimeoutError(f"{operation} failed")

    def find(self, query: dict[str, Any], **kwargs):
        self._check("find")
        self.find_kwargs = kwargs
        matched = [d for d in self.documents if _matches(d, query)]
        return FakeCursor(matched, fail_after=self.cursor_fail_after)

    async def find_one(self, query: dict[str, Any]):
        self._check("find_one")
        for document in self.documents:
            if _matches(document, query):
                return dict(document)
        return None

    async def insert_one(self, document: dict[str, Any]):
        self._check("insert_one")
        self.documents.append(dict(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one_and_update(self, query, update, upsert=False, return_document=None):
        self._check("find_one_and_update")
        for document in self.documents:
            if _matches(document, query):
                document.update(update["$set"])
                return dict(document)
        return None

    async def delete_one(self, query: dict[str, Any]):
        self._check("delete_one")
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeAdmin:
    def __init__(self):
        self.fail = False

    async def command(self, name: str):
        if self.fail:
            raise ServerSelectionTimeoutError("mongo down")
        return {"ok": 1.0}


class FakeMongoClient:
    """`client[db][collection]` and `client.admin.command(...)` only."""

    def __init__(self, collection: FakeCollection):
        self.collection = collection
        self.admin = FakeAdmin()

    def __getitem__(self, database: str):
        return {self.collection.name: self.collection}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_redis():
    """Empty in-memory Redis."""
    return FakeRedis()


@pytest.fixture
def users_collection():
    """Empty in-memory users collection."""
    return FakeCollection()


@pytest.fixture
def fake_mongo(users_collection):
    """Mongo client exposing the users collection."""
    return FakeMongoClient(users_collection)


@pytest.fixture
def client(fake_redis, fake_mongo):
    """TestClient with shared clients replaced by fakes."""
    from app.dependencies import get_mongo, get_redis, get_templates
    from app.main import app, build_templates

    templates = build_templates(os.environ["TEMPLATES_DIR"])
    app.dependency_overrides[get_redis] = lambda: fake_redis
    app.dependency_overrides[get_mongo] = lambda: fake_mongo
    app.dependency_overrides[get_templates] = lambda: templates

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()


@pytest.fixture
def sample_user_payload():
    """Create-user body with every field."""
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "age": 36,
    }
