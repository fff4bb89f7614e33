from __future__ import annotations

import pytest

_ISOLATED_ENV_VARS = (
    "HOST",
    "PORT",
    "AZUREAI__ENDPOINT",
    "AZURE_AI_FOUNDRY_ENDPOINT",
    "AZUREAI__DEPLOYMENTNAME",
    "AZUREAI__TENANTID",
    "AZURE_TENANT_ID",
)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # Run from an empty dir so a developer's .env is never picked up.
    monkeypatch.chdir(tmp_path)
    for name in _ISOLATED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    # Settings are cached via @lru_cache; clear so each test sees its own environment.
    from storefront_chat.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from storefront_chat.main import create_app
    from tests.chat._fakes import FakeCredential

    app = create_app(credential=FakeCredential("unused-token"))
    with TestClient(app) as c:
        yield c
