"""

from fastapi import Depends, FastAPI
from pkg_tokens.integrations.fastapi import create_fastapi_token_auth

token_auth = create_fastapi_token_auth(secret_key=settings.TOKEN_SECRET_KEY)

@app.get("/me")
async def me(content: TokenContent = Depends(token_auth.get_current_content)):
    return content.data

"""
from __future__ import annotations

from .deps import FastAPITokenAuth
from .security import bearer_scheme, extract_token_from_request
from ..common.auth_factory import (
    TokenAuthDependencies,
    create_token_auth,
    create_token_auth_from_settings,
)
from ...domain.constants import DEFAULT_ALGORITHM, DEFAULT_HEADER_NAME
from ...domain.value_objects import SigningKey
from ...settings import TokenSettings


def create_fastapi_token_auth(
    *,
    secret_key: SigningKey | bytes | str,
    algorithm: str = DEFAULT_ALGORITHM,
    access_ttl_seconds: int = 15 * 60,
    refresh_ttl_seconds: int = 30 * 24 * 60 * 60,
    header_name: str = DEFAULT_HEADER_NAME,
) -> FastAPITokenAuth:
    """
    High-level helper for FastAPI apps:

    - Creates TokenAuthDependencies from a secret key
    - Wraps them in FastAPITokenAuth, exposing dependencies like:

        token_auth.get_current_content
        token_auth.get_optional_content
        token_auth.get_refresh_content
        token_auth.require_claim(...)
    """
    auth: TokenAuthDependencies = create_token_auth(
        secret_key=secret_key,
        algorithm=algorithm,
        access_ttl_seconds=access_ttl_seconds,
        refresh_ttl_seconds=refresh_ttl_seconds,
        header_name=header_name,
    )
    return FastAPITokenAuth(auth=auth)


def create_fastapi_token_auth_from_settings(settings: TokenSettings) -> FastAPITokenAuth:
    return FastAPITokenAuth(auth=create_token_auth_from_settings(settings))


__all__ = [
    "FastAPITokenAuth",
    "create_fastapi_token_auth",
    "create_fastapi_token_auth_from_settings",
    "bearer_scheme",
    "extract_token_from_request",
]
