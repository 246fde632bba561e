"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from mongo_crud.main import app
from mongo_crud.models.user import User, UserCreate
from mongo_crud.services.user_store import UserStore


class InMemoryUserStore(UserStore):
    """UserStore kept in a dict, recording every call it receives."""

    def __init__(self) -> None:
        self.users: dict[ObjectId, dict] = {}
        self.calls: list[str] = []
        self.fail_with: Exception | None = None

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def get_user(self, user_id: ObjectId) -> User | None:
        self._record("get_user")
        doc = self.users.get(user_id)
        return User.from_document(doc) if doc else None

    def add_user(self, user: UserCreate) -> str:
        self._record("add_user")
        user_id = ObjectId()
        self.users[user_id] = {"_id": user_id, **user.to_document()}
        return str(user_id)

    def delete_user(self, user_id: ObjectId) -> int:
        self._record("delete_user")
        return 1 if self.users.pop(user_id, None) is not None else 0

    def ping(self) -> None:
        self._record("ping")


@pytest.fixture
def store() -> Iterator[InMemoryUserStore]:
    """Attach an in-memory store to the app for the duration of a test."""
    user_store = InMemoryUserStore()
    app.state.user_store = user_store
    yield user_store
    del app.state.user_store
    app.dependency_overrides.clear()


@pytest.fixture
def client(store: InMemoryUserStore) -> TestClient:
    """Create a FastAPI test client.

    The lifespan is not entered, so no MongoDB connection is attempted.
    """
    return TestClient(app)


@pytest.fixture
def store_error() -> PyMongoError:
    """A driver error as raised when the operation deadline expires."""
    return PyMongoError("operation exceeded time limit")
