from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests

from .config import DEFAULT_API_URL, Config
from .errors import InstagramError
from .http import HttpClient
from .users import UserResource


class InstagramClient:
    def __init__(
        self,
        *,
        access_token: str | None = None,
        client_id: str | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout_s: float = 30.0,
    ):
        self.http = HttpClient(
            base_url=api_url,
            access_token=access_token,
            client_id=client_id,
            timeout_s=timeout_s,
        )
        self.users = UserResource(self)

    @classmethod
    def from_config(cls, cfg: Config) -> "InstagramClient":
        return cls(
            access_token=cfg.access_token,
            client_id=cfg.client_id,
            api_url=cfg.api_url,
            timeout_s=cfg.timeout_s,
        )

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self._decode(path, self.http.get(path, params=params))

    def post(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self._decode(path, self.http.post(path, data=params))

    def _decode(self, path: str, resp: requests.Response) -> dict[str, Any]:
        if resp.status_code >= 400:
            raise _error_from(path, resp)
        try:
            return resp.json()
        except ValueError as e:
            raise InstagramError(
                f"Failed to decode JSON from Instagram for {path}: {e}",
                status_code=resp.status_code,
            ) from e


def _error_from(path: str, resp: requests.Response) -> InstagramError:
    # Error bodies look like {"meta": {"code": 400, "error_type": ..., "error_message": ...}}
    meta: dict[str, Any] = {}
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("meta"), dict):
        meta = body["meta"]

    error_type = meta.get("error_type")
    error_message = meta.get("error_message")
    if error_message:
        detail = f"{error_type}: {error_message}" if error_type else error_message
    else:
        detail = resp.text[:500]
    return InstagramError(
        f"Instagram API error {resp.status_code} for {path}: {detail}",
        status_code=resp.status_code,
        error_type=error_type,
        error_message=error_message,
    )
