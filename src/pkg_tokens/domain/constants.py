from enum import Enum


class TokenKind(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


# Claim names written by the codec itself; never part of TokenContent.data
TYPE_CLAIM = "type"
EXP_CLAIM = "exp"
RESERVED_CLAIMS = frozenset({TYPE_CLAIM, EXP_CLAIM})

DEFAULT_ALGORITHM = "HS256"
HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")

DEFAULT_HEADER_NAME = "Authorization"
