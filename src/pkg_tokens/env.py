from __future__ import annotations

import os

from .domain.constants import DEFAULT_ALGORITHM, DEFAULT_HEADER_NAME
from .settings import TokenSettings


def settings_from_env() -> TokenSettings:
    def _int(key: str, default: int) -> int:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError as exc:
            raise RuntimeError(f"{key} must be an integer, got {raw!r}") from exc
        if value <= 0:
            raise RuntimeError(f"{key} must be positive, got {value}")
        return value

    secret_key = os.getenv("TOKEN_SECRET_KEY")
    if not secret_key:
        raise RuntimeError("Missing token settings: TOKEN_SECRET_KEY")

    return TokenSettings(
        secret_key=secret_key,
        algorithm=os.getenv("TOKEN_ALGORITHM") or DEFAULT_ALGORITHM,
        access_ttl_seconds=_int("TOKEN_ACCESS_TTL", 15 * 60),
        refresh_ttl_seconds=_int("TOKEN_REFRESH_TTL", 30 * 24 * 60 * 60),
        header_name=os.getenv("TOKEN_HEADER_NAME") or DEFAULT_HEADER_NAME,
    )
