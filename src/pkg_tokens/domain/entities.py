from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Sequence, Union

from .constants import RESERVED_CLAIMS, TokenKind

# JSON-representable claim values. Anything else is rejected at signing time.
ClaimValue = Union[
    str,
    int,
    float,
    bool,
    None,
    Mapping[str, "ClaimValue"],
    Sequence["ClaimValue"],
]


@dataclass(slots=True)
class TokenContent:
    """
    Authenticated payload of a token.

    `kind` is a free-form tag ("access" and "refresh" are the ones this
    package issues). `expires_at` is carried as-is: parsing never rejects a
    token because it is past its expiry, see `is_expired` for that.

    `data` holds the application claims. The names "exp" and "type" are
    reserved; if present they are overwritten when the token is signed.
    """
    kind: str
    expires_at: int
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def access(cls, expires_at: int, data: Mapping[str, Any] | None = None) -> "TokenContent":
        return cls(TokenKind.ACCESS.value, expires_at, dict(data or {}))

    @classmethod
    def refresh(cls, expires_at: int, data: Mapping[str, Any] | None = None) -> "TokenContent":
        return cls(TokenKind.REFRESH.value, expires_at, dict(data or {}))

    @property
    def reserved_keys_in_data(self) -> frozenset[str]:
        return RESERVED_CLAIMS.intersection(self.data)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "expires_at": self.expires_at, "data": dict(self.data)}
