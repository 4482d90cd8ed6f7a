from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import requests

VERSION = "0.1.0"
USER_AGENT = f"instagram-client/{VERSION}"


@dataclass(frozen=True)
class HttpClient:
    base_url: str
    access_token: str | None = None
    client_id: str | None = None
    timeout_s: float = 30.0

    def url_for(self, path: str) -> str:
        return self.base_url.rstrip("/") + "/" + path.lstrip("/")

    def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> requests.Response:
        return requests.get(
            self.url_for(path),
            params=self._with_auth(params),
            headers=self._headers(),
            timeout=self.timeout_s,
        )

    def post(self, path: str, *, data: Mapping[str, Any] | None = None) -> requests.Response:
        # Instagram expects form-encoded bodies, not JSON
        return requests.post(
            self.url_for(path),
            data=self._with_auth(data),
            headers=self._headers(),
            timeout=self.timeout_s,
        )

    def _with_auth(self, params: Mapping[str, Any] | None) -> dict[str, Any]:
        """Return a copy of ``params`` carrying ``access_token`` or ``client_id``.

        Authenticated requests send the access token; anonymous ones fall back
        to the client id. Values already present in ``params`` are kept.
        """
        out: dict[str, Any] = {}
        if self.access_token:
            out["access_token"] = self.access_token
        elif self.client_id:
            out["client_id"] = self.client_id
        out.update(params or {})
        return out

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
