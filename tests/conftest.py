import base64
import json

import pytest

from pkg_tokens.adapters.pyjwt.codec import HMACTokenCodec
from pkg_tokens.domain.value_objects import SigningKey

SECRET = "secret1"

# Reference tokens signed with "secret1" (HS256)
ACCESS_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJleHAiOjE1MTYyMzkwMjIsInR5cGUiOiJhY2Nlc3MifQ"
    ".A7tHeZSJT6A1fYwbdFFDF48aPgkCr8VbkVo6QZQ8Z_c"
)
ACCESS_TOKEN_WITH_NAME = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJleHAiOjE1MTYyMzkwMjIsIm5hbWUiOiJtZSIsInR5cGUiOiJhY2Nlc3MifQ"
    ".A89XbR6gvrfIxmlqSZTlfYTXPHpXs5I5BSItYHyJFp0"
)
REFRESH_TOKEN_WITH_SURNAME = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJleHAiOjE1MTYyMzkwMjIsInN1cm5hbWUiOiJkYXRhMiIsInR5cGUiOiJyZWZyZXNoIn0"
    ".kmgVjTiCSre4OGi5H81nPKamJ7qBmO64yeZ3YhErTSM"
)
EXPIRES_AT = 1516239022


def b64url(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def b64url_decode(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def segment(obj) -> str:
    return b64url(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


@pytest.fixture
def key() -> SigningKey:
    return SigningKey(SECRET)


@pytest.fixture
def codec(key) -> HMACTokenCodec:
    return HMACTokenCodec(key)
