# src/pkg_tokens/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import KeyConfigurationError


@dataclass(frozen=True, slots=True)
class SigningKey:
    """
    Shared HMAC secret used both to sign and to verify tokens.

    Provisioned once at startup by the host application (settings, secret
    store, ...). The raw bytes never show up in `repr`.
    """
    value: bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            object.__setattr__(self, "value", self.value.encode("utf-8"))
        if not isinstance(self.value, bytes):
            raise KeyConfigurationError(
                f"Signing key must be bytes or str, got {type(self.value).__name__}"
            )
        if not self.value:
            raise KeyConfigurationError("Signing key must not be empty")

    @classmethod
    def from_str(cls, secret: str) -> "SigningKey":
        return cls(secret.encode("utf-8"))

    def __repr__(self) -> str:
        return f"SigningKey(<{len(self.value)} bytes>)"

    __str__ = __repr__
