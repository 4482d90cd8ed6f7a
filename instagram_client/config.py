from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_API_URL = "https://api.instagram.com/v1/"
DEFAULT_TIMEOUT_S = 30.0

# At least one of these must be set.
AUTH_KEYS = [
    "INSTAGRAM_ACCESS_TOKEN",
    "INSTAGRAM_CLIENT_ID",
]

OPTIONAL_KEYS = [
    "INSTAGRAM_API_URL",
    "INSTAGRAM_TIMEOUT",
]

_PLACEHOLDERS = {"PLACEHOLDER", "MASKED", ""}


@dataclass(frozen=True)
class Config:
    access_token: str | None = None
    client_id: str | None = None
    api_url: str = DEFAULT_API_URL
    timeout_s: float = DEFAULT_TIMEOUT_S

    @staticmethod
    def load_from_env(environ: Mapping[str, str] | None = None) -> "Config":
        env = os.environ if environ is None else environ

        access_token = _value(env, "INSTAGRAM_ACCESS_TOKEN")
        client_id = _value(env, "INSTAGRAM_CLIENT_ID")
        if access_token is None and client_id is None:
            raise RuntimeError(f"Missing Instagram credentials: set one of {', '.join(AUTH_KEYS)}")

        raw_timeout = _value(env, "INSTAGRAM_TIMEOUT")
        try:
            timeout_s = float(raw_timeout) if raw_timeout is not None else DEFAULT_TIMEOUT_S
        except ValueError:
            raise RuntimeError(f"INSTAGRAM_TIMEOUT is not a number: {raw_timeout!r}") from None

        return Config(
            access_token=access_token,
            client_id=client_id,
            api_url=_value(env, "INSTAGRAM_API_URL") or DEFAULT_API_URL,
            timeout_s=timeout_s,
        )


def _value(env: Mapping[str, str], key: str) -> str | None:
    val = env.get(key)
    if val is None or val.strip() in _PLACEHOLDERS:
        return None
    return val.strip()
