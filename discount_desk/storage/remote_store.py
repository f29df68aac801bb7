from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from discount_desk.core.logging_config import logger
from discount_desk.infra.retry import retry_on

TABLE_PATH = "/rest/v1/app_config"


class ConfigStoreError(Exception):
    """Transport / upstream failure while reading or writing the stored config."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        self.message = str(message)
        self.status_code = status_code
        self.detail = detail
        super().__init__(self.message)

    @property
    def is_auth_failure(self) -> bool:
        return self.status_code in (401, 403)


def _is_retryable(e: Exception) -> bool:
    if not isinstance(e, ConfigStoreError):
        return False
    return e.status_code is None or e.status_code >= 500


class RemoteConfigStore:
    """
    Key-value row in a Supabase REST table: one ``config`` JSON blob per ``app_id``.
    """

    def __init__(
        self,
        base_url: str,
        service_role_key: str,
        app_id: str,
        *,
        timeout: float = 10.0,
        read_attempts: int = 3,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.app_id = app_id
        self.timeout = timeout
        self.read_attempts = read_attempts
        self.session = session or requests.Session()
        self.headers = {
            "apikey": service_role_key,
            "Authorization": f"Bearer {service_role_key}",
        }

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        headers = {**self.headers, **kwargs.pop("headers", {})}
        try:
            return self.session.request(
                method=method,
                url=f"{self.base_url}{path}",
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            raise ConfigStoreError(f"Config store unreachable: {e}") from e

    def _rows(self, response: requests.Response, op: str) -> List[Any]:
        try:
            rows = response.json()
        except ValueError as e:
            raise ConfigStoreError(
                f"Unexpected {op} response from Supabase.",
                status_code=response.status_code,
                detail=response.text[:200],
            ) from e
        if not isinstance(rows, list):
            raise ConfigStoreError(f"Unexpected {op} response from Supabase.", status_code=response.status_code)
        return rows

    def _read_once(self) -> Optional[Dict[str, Any]]:
        response = self._request(
            "GET",
            TABLE_PATH,
            params={"app_id": f"eq.{self.app_id}", "select": "config"},
        )
        if not response.ok:
            raise ConfigStoreError("Unable to read config from Supabase.", status_code=response.status_code)

        rows = self._rows(response, "read")
        if len(rows) == 0:
            return None
        config = rows[0].get("config") if isinstance(rows[0], dict) else rows[0]
        if config is not None and not isinstance(config, dict):
            raise ConfigStoreError("Stored config row is malformed.", status_code=response.status_code)
        return config

    def read(self) -> Optional[Dict[str, Any]]:
        """Stored config blob, or None when nothing has been saved yet."""
        return retry_on(
            self._read_once,
            attempts=self.read_attempts,
            is_retryable=_is_retryable,
            label="config_store_read",
        )

    def write(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Upsert the blob; returns what the store echoed back."""
        response = self._request(
            "POST",
            TABLE_PATH,
            headers={
                "Content-Type": "application/json",
                "Prefer": "resolution=merge-duplicates,return=representation",
            },
            json=[{"app_id": self.app_id, "config": config}],
        )
        if not response.ok:
            logger.bind(status_code=response.status_code).error("config_store_write_failed")
            raise ConfigStoreError(
                "Unable to write config to Supabase.",
                status_code=response.status_code,
                detail=response.text,
            )

        rows = self._rows(response, "write")
        if rows and isinstance(rows[0], dict) and isinstance(rows[0].get("config"), dict):
            return rows[0]["config"]
        return config
