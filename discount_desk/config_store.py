from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from discount_desk.core.logging_config import logger
from discount_desk.core.settings import Settings, settings
from discount_desk.data_validators.pricing_config import coerce_config
from discount_desk.domain.defaults import DEFAULT_CONFIG
from discount_desk.domain.models import PricingConfig
from discount_desk.storage.local_cache import LocalConfigCache
from discount_desk.storage.remote_store import ConfigStoreError, RemoteConfigStore

SOURCE_REMOTE = "supabase"
SOURCE_DEFAULT = "default"
SOURCE_LOCAL = "local_cache"


@dataclass(frozen=True)
class LoadedConfig:
    config: PricingConfig
    source: str


class ConfigStore:
    """
    Remote store first, local cache as fallback, defaults as last resort.

    Without a remote store configured the local cache is the store.
    Callers validate before calling save_config.
    """

    def __init__(self, remote: Optional[RemoteConfigStore], cache: LocalConfigCache):
        self.remote = remote
        self.cache = cache

    @classmethod
    def from_settings(cls, s: Settings) -> "ConfigStore":
        remote = None
        if s.remote_configured:
            remote = RemoteConfigStore(
                s.SUPABASE_URL,
                s.SUPABASE_SERVICE_ROLE_KEY,
                s.CONFIG_APP_ID,
                timeout=s.REMOTE_TIMEOUT_SEC,
            )
        return cls(remote, LocalConfigCache(Path(s.CONFIG_CACHE_PATH)))

    def _refresh_cache(self, config: PricingConfig) -> None:
        try:
            self.cache.save(config.to_dict())
        except OSError as e:
            logger.bind(path=str(self.cache.path), error=repr(e)).warning("config_cache_write_failed")

    def _save_local(self, config: PricingConfig) -> LoadedConfig:
        try:
            self.cache.save(config.to_dict())
        except OSError as e:
            raise ConfigStoreError(f"Unable to write local config cache: {e}") from e
        return LoadedConfig(config, SOURCE_LOCAL)

    def _load_local(self) -> LoadedConfig:
        raw = self.cache.load()
        if raw is None:
            return LoadedConfig(DEFAULT_CONFIG, SOURCE_DEFAULT)
        return LoadedConfig(coerce_config(raw), SOURCE_LOCAL)

    def get_config(self) -> LoadedConfig:
        if self.remote is None:
            return self._load_local()

        try:
            raw = self.remote.read()
        except ConfigStoreError as e:
            loaded = self._load_local()
            logger.bind(error=e.message, status_code=e.status_code, fallback=loaded.source).warning(
                "config_remote_read_failed"
            )
            return loaded

        if raw is None:
            return LoadedConfig(DEFAULT_CONFIG, SOURCE_DEFAULT)

        config = coerce_config(raw)
        self._refresh_cache(config)
        return LoadedConfig(config, SOURCE_REMOTE)

    def save_config(self, config: PricingConfig) -> LoadedConfig:
        if self.remote is None:
            return self._save_local(config)

        try:
            saved = coerce_config(self.remote.write(config.to_dict()))
        except ConfigStoreError as e:
            if e.is_auth_failure:
                raise
            logger.bind(error=e.message, status_code=e.status_code).warning("config_remote_write_failed")
            return self._save_local(config)

        self._refresh_cache(saved)
        return LoadedConfig(saved, SOURCE_REMOTE)

    def restore_defaults(self) -> LoadedConfig:
        return self.save_config(DEFAULT_CONFIG)


_config_store: ConfigStore | None = None


def get_config_store() -> ConfigStore:
    global _config_store
    if _config_store is None:
        _config_store = ConfigStore.from_settings(settings)
    return _config_store


def get_current_config() -> PricingConfig:
    """Latest known-good config; never raises for transport problems."""
    return get_config_store().get_config().config
