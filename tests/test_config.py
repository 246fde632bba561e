"""Tests for settings loading."""

import pytest

from mongo_crud.config import Settings


@pytest.mark.unit
def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.mongodb_uri == "mongodb://localhost:27017"
    assert settings.api_port == 8000
    assert settings.operation_timeout_seconds == 5
    assert settings.connect_timeout_seconds == 10
    assert settings.legacy_invalid_id_status is False


@pytest.mark.unit
def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONGODB_URI", "mongodb://mongo:27017")
    monkeypatch.setenv("USERS_COLLECTION", "people")
    monkeypatch.setenv("LEGACY_INVALID_ID_STATUS", "true")

    settings = Settings(_env_file=None)

    assert settings.mongodb_uri == "mongodb://mongo:27017"
    assert settings.users_collection == "people"
    assert settings.legacy_invalid_id_status is True
