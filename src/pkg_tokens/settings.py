from __future__ import annotations

from dataclasses import dataclass

from .domain.constants import DEFAULT_ALGORITHM, DEFAULT_HEADER_NAME
from .domain.value_objects import SigningKey


@dataclass(slots=True)
class TokenSettings:
    """
    Token issuing / verification settings.

    Host code decides how to construct this (env, config file, etc.).
    """
    secret_key: str
    algorithm: str = DEFAULT_ALGORITHM

    # Lifetimes used when the expiry is derived from "now"
    access_ttl_seconds: int = 15 * 60
    refresh_ttl_seconds: int = 30 * 24 * 60 * 60

    header_name: str = DEFAULT_HEADER_NAME

    @property
    def signing_key(self) -> SigningKey:
        return SigningKey.from_str(self.secret_key)
