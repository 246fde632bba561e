"""Tests for application startup and shutdown."""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from mongo_crud.main import app, settings
from mongo_crud.services.user_store import MongoUserStore


@pytest.fixture(autouse=True)
def _reset_state() -> Iterator[None]:
    yield
    if hasattr(app.state, "user_store"):
        del app.state.user_store


@pytest.mark.unit
def test_startup_builds_store_and_shutdown_closes_client() -> None:
    mongo_client = MagicMock()

    with patch("mongo_crud.main.connect_mongo", return_value=mongo_client) as connect:
        with TestClient(app) as client:
            store = app.state.user_store
            assert client.get("/health").json()["database"] == "connected"
            mongo_client.close.assert_not_called()

    connect.assert_called_once_with(settings)
    assert isinstance(store, MongoUserStore)
    assert store.client is mongo_client
    assert store.operation_timeout == settings.operation_timeout_seconds
    mongo_client.__getitem__.assert_called_once_with(settings.database_name)
    mongo_client.__getitem__.return_value.__getitem__.assert_called_once_with(settings.users_collection)
    mongo_client.close.assert_called_once()


@pytest.mark.unit
def test_failed_connect_aborts_startup() -> None:
    error = ServerSelectionTimeoutError("no servers available")

    with patch("mongo_crud.main.connect_mongo", side_effect=error):
        with pytest.raises(ServerSelectionTimeoutError):
            with TestClient(app):
                pass

    assert not hasattr(app.state, "user_store")
