from __future__ import annotations

import json

import pytest

from discount_desk.config_store import (
    SOURCE_DEFAULT,
    SOURCE_LOCAL,
    SOURCE_REMOTE,
    ConfigStore,
)
from discount_desk.domain.defaults import DEFAULT_CONFIG
from discount_desk.data_validators.pricing_config import coerce_config
from discount_desk.storage.remote_store import ConfigStoreError, RemoteConfigStore


class FakeRemote:
    def __init__(self, stored=None, read_error=None, write_error=None):
        self.stored = stored
        self.read_error = read_error
        self.write_error = write_error
        self.writes = []

    def read(self):
        if self.read_error:
            raise self.read_error
        return self.stored

    def write(self, config):
        if self.write_error:
            raise self.write_error
        self.writes.append(config)
        self.stored = config
        return config


@pytest.fixture
def custom_config_dict(default_config_dict):
    return {**default_config_dict, "netNewListPrice": 250}


def test_no_remote_and_empty_cache_gives_defaults(cache):
    loaded = ConfigStore(None, cache).get_config()
    assert loaded.config is DEFAULT_CONFIG
    assert loaded.source == SOURCE_DEFAULT


def test_no_remote_saves_to_cache(cache, custom_config_dict):
    store = ConfigStore(None, cache)
    saved = store.save_config(coerce_config(custom_config_dict))

    assert saved.source == SOURCE_LOCAL
    loaded = store.get_config()
    assert loaded.source == SOURCE_LOCAL
    assert loaded.config.netNewListPrice == 250


def test_remote_read_refreshes_cache(cache, custom_config_dict):
    loaded = ConfigStore(FakeRemote(stored=custom_config_dict), cache).get_config()

    assert loaded.source == SOURCE_REMOTE
    assert loaded.config.netNewListPrice == 250
    assert cache.load() == custom_config_dict


def test_remote_without_row_gives_defaults(cache):
    loaded = ConfigStore(FakeRemote(stored=None), cache).get_config()
    assert loaded.source == SOURCE_DEFAULT


def test_remote_failure_falls_back_to_cache_then_defaults(cache, custom_config_dict):
    remote = FakeRemote(read_error=ConfigStoreError("down", status_code=502))
    store = ConfigStore(remote, cache)

    assert store.get_config().source == SOURCE_DEFAULT

    cache.save(custom_config_dict)
    loaded = store.get_config()
    assert loaded.source == SOURCE_LOCAL
    assert loaded.config.netNewListPrice == 250


def test_save_writes_remote_and_cache(cache, custom_config_dict):
    remote = FakeRemote()
    saved = ConfigStore(remote, cache).save_config(coerce_config(custom_config_dict))

    assert saved.source == SOURCE_REMOTE
    assert remote.writes == [custom_config_dict]
    assert cache.load() == custom_config_dict


def test_save_transport_failure_keeps_change_locally(cache, custom_config_dict):
    remote = FakeRemote(write_error=ConfigStoreError("boom", status_code=503))
    saved = ConfigStore(remote, cache).save_config(coerce_config(custom_config_dict))

    assert saved.source == SOURCE_LOCAL
    assert cache.load() == custom_config_dict


def test_save_auth_failure_is_raised(cache, custom_config_dict):
    remote = FakeRemote(write_error=ConfigStoreError("nope", status_code=401))
    with pytest.raises(ConfigStoreError):
        ConfigStore(remote, cache).save_config(coerce_config(custom_config_dict))
    assert cache.load() is None


def test_restore_defaults(cache, default_config_dict):
    remote = FakeRemote(stored={"netNewListPrice": 1})
    restored = ConfigStore(remote, cache).restore_defaults()

    assert restored.config.to_dict() == default_config_dict
    assert remote.stored == default_config_dict


def test_unreadable_cache_is_ignored(cache):
    cache.path.parent.mkdir(parents=True, exist_ok=True)
    cache.path.write_text("{not json", encoding="utf-8")
    assert cache.load() is None

    cache.path.write_text(json.dumps({"key": "other", "config": {}}), encoding="utf-8")
    assert cache.load() is None


class GatewayPage:
    status_code = 200
    ok = True
    text = "<html>gateway</html>"

    def json(self):
        return json.loads(self.text)


class GatewaySession:
    def request(self, **kwargs):
        return GatewayPage()


@pytest.fixture
def gateway_remote():
    return RemoteConfigStore("https://db.example.co", "service-key", "discount-app", session=GatewaySession())


def test_non_json_remote_reply_falls_back(cache, gateway_remote, custom_config_dict):
    store = ConfigStore(gateway_remote, cache)
    loaded = store.get_config()
    assert loaded.config is DEFAULT_CONFIG
    assert loaded.source == SOURCE_DEFAULT

    cache.save(custom_config_dict)
    assert store.get_config().source == SOURCE_LOCAL


def test_non_json_write_echo_keeps_change_locally(cache, gateway_remote, custom_config_dict):
    saved = ConfigStore(gateway_remote, cache).save_config(coerce_config(custom_config_dict))
    assert saved.source == SOURCE_LOCAL
    assert cache.load() == custom_config_dict


def _disk_full(config):
    raise OSError("No space left on device")


def test_cache_write_failure_does_not_break_remote_read(cache, custom_config_dict, monkeypatch):
    monkeypatch.setattr(cache, "save", _disk_full)
    loaded = ConfigStore(FakeRemote(stored=custom_config_dict), cache).get_config()
    assert loaded.source == SOURCE_REMOTE
    assert loaded.config.netNewListPrice == 250


def test_cache_write_failure_does_not_break_remote_save(cache, custom_config_dict, monkeypatch):
    monkeypatch.setattr(cache, "save", _disk_full)
    saved = ConfigStore(FakeRemote(), cache).save_config(coerce_config(custom_config_dict))
    assert saved.source == SOURCE_REMOTE


def test_local_only_save_failure_is_store_error(cache, custom_config_dict, monkeypatch):
    monkeypatch.setattr(cache, "save", _disk_full)
    with pytest.raises(ConfigStoreError) as exc:
        ConfigStore(None, cache).save_config(coerce_config(custom_config_dict))
    assert not exc.value.is_auth_failure
