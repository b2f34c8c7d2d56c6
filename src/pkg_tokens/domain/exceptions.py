class TokenError(Exception):
    """Base class for every error raised by pkg_tokens."""
    pass


# --- Client-side failures (the presented token is not acceptable) ---------


class InvalidTokenError(TokenError):
    """Raised when a client-supplied token is rejected."""
    pass


class ExtractionError(InvalidTokenError):
    """Raised when no token could be found or the token is structurally malformed."""
    pass


class AlgorithmMismatchError(InvalidTokenError):
    """Raised when the token header names an algorithm outside the HMAC family."""
    pass


class VerificationError(InvalidTokenError):
    """Raised when the token signature does not match."""
    pass


class ClaimShapeError(InvalidTokenError):
    """Raised when `exp` or `type` is missing or has the wrong type."""
    pass


class TokenExpiredError(InvalidTokenError):
    """Raised when token has expired."""
    pass


class UnexpectedTokenKindError(InvalidTokenError):
    """Raised when e.g. a refresh token is presented where an access token is expected."""
    pass


# --- Server-side failures -------------------------------------------------


class TokenIssuanceError(TokenError):
    """Raised when a token could not be issued."""
    pass


class SigningError(TokenIssuanceError):
    """Raised when the claim set cannot be encoded or signed."""
    pass


class TypeMismatchError(TokenIssuanceError):
    """Raised when pair issuance receives contents of the wrong kind."""
    pass


class KeyConfigurationError(TokenError):
    """Raised on server misconfiguration (empty key, non-HMAC algorithm)."""
    pass
