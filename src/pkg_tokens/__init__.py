"""
pkg_tokens

Clean-architecture core for HMAC-signed access/refresh tokens: signing,
verified parsing and bearer extraction, with optional framework
integrations (FastAPI).
"""

__version__ = "0.1.0"

from .domain.entities import TokenContent, ClaimValue
from .domain.constants import TokenKind, RESERVED_CLAIMS, HMAC_ALGORITHMS
from .domain.exceptions import (
    TokenError,
    InvalidTokenError,
    ExtractionError,
    AlgorithmMismatchError,
    VerificationError,
    ClaimShapeError,
    TokenExpiredError,
    UnexpectedTokenKindError,
    TokenIssuanceError,
    SigningError,
    TypeMismatchError,
    KeyConfigurationError,
)
from .domain.value_objects import SigningKey
from .domain.ports import TokenCodec, HeaderSource

from .application.use_cases.issue_pair import IssueTokenPairUseCase, TokenPair
from .application.use_cases.authenticate import AuthenticateBearerUseCase, is_expired

# PyJWT adapter
from .adapters.pyjwt.codec import HMACTokenCodec, sign, parse

from .integrations.common.bearer import extract_token, extract_from_headers
from .integrations.common.auth_factory import (
    TokenAuthDependencies,
    create_token_auth,
    create_token_auth_from_settings,
)
from .settings import TokenSettings
from .env import settings_from_env

__all__ = [
    "__version__",
    # domain core
    "TokenContent",
    "ClaimValue",
    "TokenKind",
    "RESERVED_CLAIMS",
    "HMAC_ALGORITHMS",
    "SigningKey",
    "TokenCodec",
    "HeaderSource",
    # exceptions
    "TokenError",
    "InvalidTokenError",
    "ExtractionError",
    "AlgorithmMismatchError",
    "VerificationError",
    "ClaimShapeError",
    "TokenExpiredError",
    "UnexpectedTokenKindError",
    "TokenIssuanceError",
    "SigningError",
    "TypeMismatchError",
    "KeyConfigurationError",
    # use cases
    "IssueTokenPairUseCase",
    "TokenPair",
    "AuthenticateBearerUseCase",
    "is_expired",
    # adapters
    "HMACTokenCodec",
    "sign",
    "parse",
    # bearer extraction / facade
    "extract_token",
    "extract_from_headers",
    "TokenAuthDependencies",
    "create_token_auth",
    "create_token_auth_from_settings",
    # configuration
    "TokenSettings",
    "settings_from_env",
]
