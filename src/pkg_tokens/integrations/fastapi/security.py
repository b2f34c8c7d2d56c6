from __future__ import annotations

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPBearer

from ..common.bearer import extract_token
from ...domain.constants import DEFAULT_HEADER_NAME

# Expose this so apps get the bearer scheme in their OpenAPI security docs.
# Extraction below does not use it: HTTPBearer insists on the "Bearer" word.
bearer_scheme = HTTPBearer(auto_error=False)


def extract_token_from_request(
    request: Request,
    header_name: str = DEFAULT_HEADER_NAME,
) -> str:
    """
    Extract a token from the `<scheme> <token>` credential header.

    The scheme word is not checked (see `extract_token`).

    Raises HTTPException(401) if no token is found.
    """
    token = extract_token(request.headers.get(header_name))
    if token:
        return token

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
