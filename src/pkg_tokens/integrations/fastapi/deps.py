from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from .security import bearer_scheme, extract_token_from_request
from ..common.auth_factory import TokenAuthDependencies
from ...domain.entities import TokenContent
from ...domain.exceptions import (
    InvalidTokenError,
    KeyConfigurationError,
    TokenExpiredError,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FastAPITokenAuth:
    """
    FastAPI integration for pkg_tokens, built on top of the
    framework-agnostic TokenAuthDependencies facade.

    Client-side token problems map to 401, key misconfiguration to 500.
    HMACTokenCodec reports a bad key or algorithm when it is built (so
    `create_fastapi_token_auth` fails at startup); the 500 mapping is for
    custom TokenCodec implementations that only find out while parsing.

    The `credentials` parameters only put the bearer scheme into the
    OpenAPI schema; the token is read from the raw header, whatever the
    scheme word.
    """

    auth: TokenAuthDependencies

    # ------------------------------------------------------------------ #
    # Base dependencies
    # ------------------------------------------------------------------ #

    def _authenticate(self, request: Request, use_case) -> TokenContent:
        token = extract_token_from_request(request, self.auth.header_name)
        try:
            return use_case.execute_token(token)
        except TokenExpiredError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token expired",
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc
        except InvalidTokenError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(exc),
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc
        except KeyConfigurationError as exc:
            logger.error("Token verification is misconfigured: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Authentication is misconfigured",
            ) from exc

    async def get_current_content(
            self,
            request: Request,
            credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> TokenContent:
        """Dependency: Require a valid, unexpired access token."""
        return self._authenticate(request, self.auth.access_use_case)

    async def get_refresh_content(
            self,
            request: Request,
            credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> TokenContent:
        """Dependency: Require a valid, unexpired refresh token."""
        return self._authenticate(request, self.auth.refresh_use_case)

    async def get_optional_content(
            self,
            request: Request,
            credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> Optional[TokenContent]:
        """Dependency: Optional authentication."""
        try:
            return self._authenticate(request, self.auth.access_use_case)
        except HTTPException as exc:
            if exc.status_code == status.HTTP_401_UNAUTHORIZED:
                # no token or bad token -> anonymous
                return None
            raise

    # ------------------------------------------------------------------ #
    # Dependency factories
    # ------------------------------------------------------------------ #

    def require_claim(self, name: str, *allowed: object) -> Callable:
        """
        Dependency factory: require claim `name` on the access token, and
        when `allowed` is given, one of those values.
        """

        async def dependency(
                request: Request,
                credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
        ) -> TokenContent:
            content = await self.get_current_content(request, credentials)
            if name not in content.data:
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                                    detail=f"Missing claim {name!r}")
            if allowed and content.data[name] not in allowed:
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                                    detail=f"Claim {name!r} not allowed")
            return content

        return dependency
