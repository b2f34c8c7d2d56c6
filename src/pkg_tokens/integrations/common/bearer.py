from __future__ import annotations

from typing import Mapping, Optional, Union

from ...domain.constants import DEFAULT_HEADER_NAME
from ...domain.ports import HeaderSource


def extract_token(header_value: Optional[str]) -> str:
    """
    Extract the token from a credential header value.

    E.g. from `Bearer <token>` returns `<token>`.

    The value is split on single spaces and the second part is returned only
    when there are exactly two parts; anything else yields "" which callers
    must read as "no token". The scheme word is deliberately not checked, so
    `Token <token>` is accepted just like `Bearer <token>`.
    """
    parts = (header_value or "").split(" ")
    if len(parts) != 2:
        return ""
    return parts[1]


def extract_from_headers(
    headers: Union[HeaderSource, Mapping[str, str]],
    key: str = DEFAULT_HEADER_NAME,
) -> str:
    """Look up `key` in `headers` and extract the token from it ("" if absent)."""
    return extract_token(headers.get(key))
