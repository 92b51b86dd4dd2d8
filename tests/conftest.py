"""
Shared test fixtures.

Provides settings/config objects that never touch the real environment,
a container wired to the in-memory repository, a FastAPI TestClient, and
a small fake of the Firestore client API used by FirestorePostRepository.
"""

import asyncio
import copy
import os
import sys
import uuid

import pytest
from fastapi.testclient import TestClient
from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from simpleblog.domain.entities import PostDraft
from simpleblog.infrastructure.config.container import Container
from simpleblog.infrastructure.config.settings import AppConfig, Settings
from simpleblog.infrastructure.database.repositories.memory_post_repo import MemoryPostRepository
from simpleblog.presentation.web.app import create_app


def run(coro):
    """Run a coroutine to completion in a fresh event loop."""
    return asyncio.run(coro)


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings with explicit test values (init kwargs win over env/.env)."""
    return Settings(
        host="127.0.0.1",
        port=3999,
        app_env="development",
        storage_backend="memory",
        default_author_name="Test Author",
        default_author_avatar="",
    )


@pytest.fixture
def app_config():
    return AppConfig({"site": {"name": "TestBlog", "per_page": 2, "home_count": 2}})


# =============================================================================
# Container / App Fixtures
# =============================================================================

@pytest.fixture
def repo():
    return MemoryPostRepository()


@pytest.fixture
def container(settings, app_config, repo):
    return Container(settings=settings, app_config=app_config, post_repo=repo)


@pytest.fixture
def client(container):
    return TestClient(create_app(container))


@pytest.fixture
def create_post(container):
    """Factory that stores a post through the create use case."""

    def _create(title="Hello", content="World", **kwargs):
        draft = PostDraft(title=title, content=content, **kwargs)
        return run(container.create_post_use_case().execute(draft))

    return _create


# =============================================================================
# Fake Firestore
# =============================================================================

class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentRef:
    def __init__(self, store, doc_id):
        self._store = store
        self.id = doc_id

    def get(self):
        return FakeSnapshot(self.id, self._store.get(self.id))

    def set(self, data):
        self._store[self.id] = copy.deepcopy(data)

    def update(self, data):
        if self.id not in self._store:
            raise google_exceptions.NotFound(f"No document to update: {self.id}")
        doc = self._store[self.id]
        for key, value in data.items():
            target = doc
            *parents, leaf = key.split(".")
            for part in parents:
                target = target.setdefault(part, {})
            if isinstance(value, firestore.Increment):
                target[leaf] = target.get(leaf, 0) + value.value
            else:
                target[leaf] = copy.deepcopy(value)

    def delete(self):
        self._store.pop(self.id, None)


class FakeQuery:
    def __init__(self, store, field, direction):
        self._store = store
        self._field = field
        self._reverse = direction == "DESCENDING"

    def stream(self):
        docs = sorted(
            self._store.items(), key=lambda kv: kv[1][self._field], reverse=self._reverse
        )
        return iter([FakeSnapshot(doc_id, copy.deepcopy(data)) for doc_id, data in docs])


class FakeCollection:
    def __init__(self, store):
        self._store = store

    def document(self, doc_id=None):
        return FakeDocumentRef(self._store, doc_id or uuid.uuid4().hex[:20])

    def order_by(self, field, direction="ASCENDING"):
        return FakeQuery(self._store, field, direction)


class FakeFirestore:
    def __init__(self):
        self.collections = {}

    def collection(self, name):
        return FakeCollection(self.collections.setdefault(name, {}))


@pytest.fixture
def fake_firestore():
    return FakeFirestore()
