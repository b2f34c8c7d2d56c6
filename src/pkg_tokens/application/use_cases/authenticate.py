from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from ...integrations.common.bearer import extract_token
from ...domain.entities import TokenContent
from ...domain.exceptions import (
    ExtractionError,
    TokenExpiredError,
    UnexpectedTokenKindError,
)
from ...domain.ports import TokenCodec

logger = logging.getLogger(__name__)


def is_expired(content: TokenContent, now: Optional[float] = None) -> bool:
    """
    True once `now` (default: current Unix time) has reached `expires_at`.

    Kept out of the codec so parsing stays a pure function of token and key.
    """
    if now is None:
        now = time.time()
    return now >= content.expires_at


@dataclass(slots=True)
class AuthenticateBearerUseCase:
    """
    Application use case:
    - Pull the token out of an Authorization header value
    - Parse/verify it via the TokenCodec port
    - Optionally apply expiry and kind policies on the result

    With the defaults (no expected kind, no expiry enforcement) this is
    exactly "header value -> TokenContent".
    """

    codec: TokenCodec
    expected_kind: Optional[str] = None
    enforce_expiry: bool = False
    clock: Callable[[], float] = field(default=time.time)

    def execute(self, header_value: Optional[str]) -> TokenContent:
        """
        Authenticate a raw Authorization header value.

        Raises:
            ExtractionError
            AlgorithmMismatchError
            VerificationError
            ClaimShapeError
            TokenExpiredError
            UnexpectedTokenKindError
        """
        token = extract_token(header_value)
        if not token:
            raise ExtractionError("No bearer token found in header")

        return self.execute_token(token)

    def execute_token(self, token: str) -> TokenContent:
        """Same as `execute`, for a token that was already extracted."""
        content = self.codec.parse(token)

        if self.expected_kind is not None and content.kind != self.expected_kind:
            logger.debug("Rejecting %r token, expected %r", content.kind, self.expected_kind)
            raise UnexpectedTokenKindError(
                f"Expected a {self.expected_kind!r} token, got {content.kind!r}"
            )

        if self.enforce_expiry and is_expired(content, self.clock()):
            logger.debug("Rejecting token expired at %s", content.expires_at)
            raise TokenExpiredError("Token has expired")

        return content
