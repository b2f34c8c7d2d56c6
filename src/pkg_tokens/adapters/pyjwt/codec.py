from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping

import jwt
from jwt.api_jws import PyJWS
from jwt.exceptions import (
    DecodeError,
    InvalidSignatureError,
    InvalidTokenError as JWTInvalidTokenError,
    PyJWTError,
)
from jwt.utils import base64url_decode

from ...domain.constants import (
    DEFAULT_ALGORITHM,
    EXP_CLAIM,
    HMAC_ALGORITHMS,
    RESERVED_CLAIMS,
    TYPE_CLAIM,
)
from ...domain.entities import TokenContent
from ...domain.exceptions import (
    AlgorithmMismatchError,
    ClaimShapeError,
    ExtractionError,
    KeyConfigurationError,
    SigningError,
    VerificationError,
)
from ...domain.ports import TokenCodec
from ...domain.value_objects import SigningKey

logger = logging.getLogger(__name__)

# Signs raw payload bytes; PyJWT's registered-claim checks only run in jwt.encode
_jws = PyJWS()

# Expiry and the other registered claims are application data here; only
# the signature is checked by PyJWT.
_DECODE_OPTIONS = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


class CanonicalClaimsEncoder(json.JSONEncoder):
    """
    JSON encoder producing a deterministic claim segment.

    Keys are sorted at every nesting level and NaN/Infinity are refused, so
    the same TokenContent always signs to the same token and every value
    that is accepted survives a round-trip.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["sort_keys"] = True
        kwargs["allow_nan"] = False
        super().__init__(*args, **kwargs)


class HMACTokenCodec(TokenCodec):
    """
    Adapter implementing TokenCodec port using PyJWT and a shared secret.

    Infrastructure layer:
    - Knows about JWT structure, HMAC signing and verification.
    - Holds the single SigningKey for its whole lifetime.
    """

    def __init__(self, key: SigningKey, algorithm: str = DEFAULT_ALGORITHM) -> None:
        if not isinstance(key, SigningKey):
            key = SigningKey(key)
        if algorithm not in HMAC_ALGORITHMS:
            raise KeyConfigurationError(
                f"Unsupported signing algorithm {algorithm!r}, expected one of {HMAC_ALGORITHMS}"
            )
        self._key = key
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def __repr__(self) -> str:
        return f"HMACTokenCodec(algorithm={self._algorithm!r}, key={self._key!r})"

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def sign(self, content: TokenContent) -> str:
        """
        Sign TokenContent into a compact JWS string.

        Raises:
            SigningError
        """
        # same shape rules as parse, so every issued token parses back
        if not isinstance(content.expires_at, int) or isinstance(content.expires_at, bool):
            raise SigningError(
                f"Expire time must be an integer timestamp, got {content.expires_at!r}"
            )
        if not isinstance(content.kind, str):
            raise SigningError(f"Token type must be a string, got {content.kind!r}")

        overwritten = content.reserved_keys_in_data
        if overwritten:
            logger.warning(
                "Reserved claims %s in token data are overwritten", sorted(overwritten)
            )

        claims: Dict[str, Any] = dict(content.data)
        claims[TYPE_CLAIM] = content.kind
        claims[EXP_CLAIM] = content.expires_at

        try:
            payload = json.dumps(
                claims, separators=(",", ":"), cls=CanonicalClaimsEncoder
            ).encode("utf-8")
            return _jws.encode(
                payload,
                self._key.value,
                algorithm=self._algorithm,
                json_encoder=CanonicalClaimsEncoder,
            )
        except (TypeError, ValueError, PyJWTError) as exc:
            raise SigningError(f"Cannot sign token claims: {exc}") from exc

    def parse(self, token: str) -> TokenContent:
        """
        Verify a token and map it back into TokenContent.

        Expiry is NOT enforced; callers decide on the returned `expires_at`.

        Raises:
            ExtractionError
            AlgorithmMismatchError
            VerificationError
            ClaimShapeError
        """
        if not token:
            raise ExtractionError("No token supplied")

        try:
            header = jwt.get_unverified_header(token)
        except PyJWTError as exc:
            logger.debug("Rejecting token with unreadable header: %s", exc)
            raise ExtractionError(f"Malformed token: {exc}") from exc

        algorithm = header.get("alg")
        if algorithm not in HMAC_ALGORITHMS:
            logger.debug("Rejecting token signed with algorithm %r", algorithm)
            raise AlgorithmMismatchError(f"Unexpected signing algorithm: {algorithm!r}")

        try:
            claims = jwt.decode(
                token,
                self._key.value,
                algorithms=list(HMAC_ALGORITHMS),
                options=_DECODE_OPTIONS,
            )
        except InvalidSignatureError as exc:
            logger.debug("Rejecting token with bad signature")
            raise VerificationError("Signature verification failed") from exc
        except DecodeError as exc:
            if _has_readable_claims(token):
                # header and claims are fine, so only the signature segment is broken
                logger.debug("Rejecting token with undecodable signature: %s", exc)
                raise VerificationError("Signature verification failed") from exc
            logger.debug("Rejecting undecodable token: %s", exc)
            raise ExtractionError(f"Malformed token: {exc}") from exc
        except JWTInvalidTokenError as exc:
            raise VerificationError(f"Invalid token: {exc}") from exc

        return self._content_from_claims(claims)

    # ------------------------------------------------------------------ #
    # Internal: claims -> TokenContent mapping
    # ------------------------------------------------------------------ #

    @staticmethod
    def _content_from_claims(claims: Mapping[str, Any]) -> TokenContent:
        expires_at = claims.get(EXP_CLAIM)
        # bool is an int subclass, but `true` is not a timestamp
        if not isinstance(expires_at, int) or isinstance(expires_at, bool):
            raise ClaimShapeError("cannot extract expire time")

        kind = claims.get(TYPE_CLAIM)
        if not isinstance(kind, str):
            raise ClaimShapeError("cannot extract token type")

        data = {k: v for k, v in claims.items() if k not in RESERVED_CLAIMS}
        return TokenContent(kind=kind, expires_at=expires_at, data=data)


def sign(content: TokenContent, key: SigningKey | bytes | str) -> str:
    """One-shot `HMACTokenCodec(key).sign(content)`."""
    return HMACTokenCodec(_as_key(key)).sign(content)


def parse(token: str, key: SigningKey | bytes | str) -> TokenContent:
    """One-shot `HMACTokenCodec(key).parse(token)`."""
    return HMACTokenCodec(_as_key(key)).parse(token)


def _has_readable_claims(token: str) -> bool:
    """True if `token` has three segments and the middle one is a JSON object."""
    segments = token.split(".")
    if len(segments) != 3:
        return False
    try:
        claims = json.loads(base64url_decode(segments[1]))
    except (TypeError, ValueError):
        return False
    return isinstance(claims, dict)


def _as_key(key: SigningKey | bytes | str) -> SigningKey:
    return key if isinstance(key, SigningKey) else SigningKey(key)
