from __future__ import annotations

from typing import Optional, Protocol

from .entities import TokenContent


class TokenCodec(Protocol):
    """
    Port for turning TokenContent into a signed token string and back.

    Implementations live in the adapters layer (e.g. the PyJWT codec) and
    hold the signing key themselves.
    """

    def sign(self, content: TokenContent) -> str:
        """
        Build the claim set from `content` and sign it.

        Raises:
          - SigningError
        """
        ...

    def parse(self, token: str) -> TokenContent:
        """
        Verify the token and map its claims back into TokenContent.

        Should:
          - refuse non-HMAC algorithms before verifying
          - verify signature
          - check `exp` / `type` shape (but NOT expiry)
        Raises:
          - ExtractionError
          - AlgorithmMismatchError
          - VerificationError
          - ClaimShapeError
        """
        ...


class HeaderSource(Protocol):
    """Anything headers can be read from: a dict, Starlette `Headers`, ..."""

    def get(self, key: str) -> Optional[str]:
        ...
