from __future__ import annotations

import pytest

from users_backend.api import create_api
from users_backend.settings import get_settings


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_PORT", "9001")
    monkeypatch.setenv("CORS_ORIGINS", '["https://example.com"]')
    get_settings.cache_clear()

    config = get_settings()

    assert config.api_port == 9001
    assert config.cors_origins == ["https://example.com"]
    assert config.database_url.startswith("sqlite")


def test_create_api_registers_users_routes() -> None:
    app = create_api()

    paths = set(app.openapi()["paths"])
    assert paths == {"/api/users", "/api/users/{user_id}", "/api/users/login"}
