import pytest
from fastapi.testclient import TestClient

from discount_desk.config_store import ConfigStore, get_config_store
from discount_desk.core.rate_limit import limiter
from discount_desk.core.settings import settings
from discount_desk.main import app
from discount_desk.storage.local_cache import LocalConfigCache

TEST_PASSCODE = "test-passcode"


@pytest.fixture
def store(tmp_path):
    return ConfigStore(None, LocalConfigCache(tmp_path / "discount_config_v2.json"))


@pytest.fixture
def client(store, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSCODE", TEST_PASSCODE)
    app.dependency_overrides[get_config_store] = lambda: store
    limiter.reset()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"x-admin-passcode": TEST_PASSCODE}
