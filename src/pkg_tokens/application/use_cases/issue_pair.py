from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple

from ...domain.constants import TokenKind
from ...domain.entities import TokenContent
from ...domain.exceptions import TypeMismatchError
from ...domain.ports import TokenCodec

logger = logging.getLogger(__name__)


class TokenPair(NamedTuple):
    access_token: str
    refresh_token: str


@dataclass(slots=True)
class IssueTokenPairUseCase:
    """
    Application use case:
    - Check that the two contents are an access and a refresh content
    - Sign both via the TokenCodec port

    Either both tokens are returned or an error is raised; a half-issued
    pair never leaves this use case.
    """

    codec: TokenCodec

    def issue_pair_with_content(
            self,
            access_content: TokenContent,
            refresh_content: TokenContent,
    ) -> TokenPair:
        """
        Raises:
            TypeMismatchError (before anything is signed)
            SigningError
        """
        if (
                access_content.kind != TokenKind.ACCESS.value
                or refresh_content.kind != TokenKind.REFRESH.value
        ):
            raise TypeMismatchError(
                f"mismatch token type: expected ({TokenKind.ACCESS.value!r}, "
                f"{TokenKind.REFRESH.value!r}), got ({access_content.kind!r}, "
                f"{refresh_content.kind!r})"
            )

        access_token = self.codec.sign(access_content)
        refresh_token = self.codec.sign(refresh_content)
        logger.debug(
            "Issued token pair (access exp=%s, refresh exp=%s)",
            access_content.expires_at,
            refresh_content.expires_at,
        )
        return TokenPair(access_token, refresh_token)

    def issue_pair(
            self,
            access_expires_at: int,
            refresh_expires_at: int,
            access_data: Mapping[str, Any] | None = None,
            refresh_data: Mapping[str, Any] | None = None,
    ) -> TokenPair:
        """Build access/refresh contents with fixed kinds and sign them."""
        return self.issue_pair_with_content(
            TokenContent.access(access_expires_at, access_data),
            TokenContent.refresh(refresh_expires_at, refresh_data),
        )
