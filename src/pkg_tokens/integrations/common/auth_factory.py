from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .bearer import extract_token
from ...adapters.pyjwt.codec import HMACTokenCodec
from ...application.use_cases.authenticate import AuthenticateBearerUseCase
from ...application.use_cases.issue_pair import IssueTokenPairUseCase, TokenPair
from ...domain.constants import DEFAULT_ALGORITHM, DEFAULT_HEADER_NAME, TokenKind
from ...domain.entities import TokenContent
from ...domain.ports import TokenCodec
from ...domain.value_objects import SigningKey
from ...settings import TokenSettings


@dataclass(slots=True)
class TokenAuthDependencies:
    """
    Framework-agnostic token facade.

    Integrations (FastAPI, CLI, etc.) adapt this to their own dependency
    systems. Access and refresh authenticators enforce kind and expiry; the
    bare codec does neither.
    """

    codec: TokenCodec
    issue_use_case: IssueTokenPairUseCase
    access_use_case: AuthenticateBearerUseCase
    refresh_use_case: AuthenticateBearerUseCase
    access_ttl_seconds: int
    refresh_ttl_seconds: int
    header_name: str = DEFAULT_HEADER_NAME
    clock: Callable[[], float] = time.time

    # --- Issuing ------------------------------------------------------------

    def issue_pair(
            self,
            access_data: Mapping[str, Any] | None = None,
            refresh_data: Mapping[str, Any] | None = None,
            now: Optional[int] = None,
    ) -> TokenPair:
        """Issue a pair whose expiries are `now` plus the configured TTLs."""
        issued_at = int(self.clock()) if now is None else now
        return self.issue_use_case.issue_pair(
            access_expires_at=issued_at + self.access_ttl_seconds,
            refresh_expires_at=issued_at + self.refresh_ttl_seconds,
            access_data=access_data,
            refresh_data=refresh_data,
        )

    def issue_pair_with_content(
            self,
            access_content: TokenContent,
            refresh_content: TokenContent,
    ) -> TokenPair:
        return self.issue_use_case.issue_pair_with_content(access_content, refresh_content)

    # --- Verifying ----------------------------------------------------------

    def extract(self, headers: Mapping[str, str]) -> str:
        return extract_token(headers.get(self.header_name))

    def authenticate_access(self, header_value: Optional[str]) -> TokenContent:
        """Authorization header value -> unexpired access TokenContent."""
        return self.access_use_case.execute(header_value)

    def authenticate_refresh(self, header_value: Optional[str]) -> TokenContent:
        """Authorization header value -> unexpired refresh TokenContent."""
        return self.refresh_use_case.execute(header_value)

    def refresh(
            self,
            header_value: Optional[str],
            access_data: Mapping[str, Any] | None = None,
            now: Optional[int] = None,
    ) -> TokenPair:
        """
        Exchange a valid refresh token for a new pair.

        The refresh token's data is carried into the new refresh token;
        `access_data` defaults to the same data.
        """
        current = self.authenticate_refresh(header_value)
        return self.issue_pair(
            access_data=current.data if access_data is None else access_data,
            refresh_data=current.data,
            now=now,
        )


def create_token_auth(
        *,
        secret_key: SigningKey | bytes | str,
        algorithm: str = DEFAULT_ALGORITHM,
        access_ttl_seconds: int = 15 * 60,
        refresh_ttl_seconds: int = 30 * 24 * 60 * 60,
        header_name: str = DEFAULT_HEADER_NAME,
        clock: Callable[[], float] = time.time,
) -> TokenAuthDependencies:
    """
    High-level factory: secret + lifetimes -> TokenAuthDependencies.

    - builds one HMACTokenCodec holding the key
    - wires the pair issuer and the access/refresh authenticators
    - returns a TokenAuthDependencies facade.
    """
    key = secret_key if isinstance(secret_key, SigningKey) else SigningKey(secret_key)
    codec: TokenCodec = HMACTokenCodec(key, algorithm=algorithm)

    return TokenAuthDependencies(
        codec=codec,
        issue_use_case=IssueTokenPairUseCase(codec=codec),
        access_use_case=AuthenticateBearerUseCase(
            codec=codec,
            expected_kind=TokenKind.ACCESS.value,
            enforce_expiry=True,
            clock=clock,
        ),
        refresh_use_case=AuthenticateBearerUseCase(
            codec=codec,
            expected_kind=TokenKind.REFRESH.value,
            enforce_expiry=True,
            clock=clock,
        ),
        access_ttl_seconds=access_ttl_seconds,
        refresh_ttl_seconds=refresh_ttl_seconds,
        header_name=header_name,
        clock=clock,
    )


def create_token_auth_from_settings(
        settings: TokenSettings,
        *,
        clock: Callable[[], float] = time.time,
) -> TokenAuthDependencies:
    return create_token_auth(
        secret_key=settings.signing_key,
        algorithm=settings.algorithm,
        access_ttl_seconds=settings.access_ttl_seconds,
        refresh_ttl_seconds=settings.refresh_ttl_seconds,
        header_name=settings.header_name,
        clock=clock,
    )
