"""
Custom exceptions for Firebase authentication.
"""
from typing import Any


class AuthError(Exception):
    """Base exception for all Firebase authentication errors."""
    pass


class ConfigurationError(AuthError):
    """Raised when required credentials are missing or unusable."""
    pass


class PrivateKeyError(ConfigurationError):
    """Raised when the service account private key cannot be parsed."""
    pass


class AuthenticationError(AuthError):
    """Raised when an ID token fails verification."""
    pass


class InvalidTokenInputError(AuthenticationError):
    """Raised when the value passed for verification is not a string."""
    pass


class TokenMalformedError(AuthenticationError):
    """Raised when a token is malformed or unparseable."""
    pass


class TokenClaimError(AuthenticationError):
    """Raised when a header or payload claim is missing or has the wrong value."""

    def __init__(self, message: str, claim: str, expected: Any = None, actual: Any = None):
        self.claim = claim
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class MissingKidError(TokenClaimError):
    pass


class IncorrectAlgorithmError(TokenClaimError):
    pass


class IncorrectAudienceError(TokenClaimError):
    pass


class IncorrectIssuerError(TokenClaimError):
    pass


class MissingSubjectError(TokenClaimError):
    pass


class EmptySubjectError(TokenClaimError):
    pass


class SubjectTooLongError(TokenClaimError):
    pass


class KeyFetchError(AuthenticationError):
    """Raised when Google's public certificates cannot be retrieved."""
    pass


class UnknownKeyIdError(AuthenticationError):
    """Raised when the token's kid has no matching public certificate."""
    pass


class TokenExpiredError(AuthenticationError):
    """Raised when a token has expired."""
    pass


class TokenSignatureError(AuthenticationError):
    """Raised when a token has an invalid signature or fails verified decoding."""
    pass


class HTTPStatusError(AuthError):
    """Raised when the Identity Toolkit answers with a non-success status."""

    def __init__(self, message: str, response):
        self.response = response
        super().__init__(message)


class RetriableHTTPError(HTTPStatusError):
    """Raised for 3xx responses; the request can be retried."""
    pass


class ClientHTTPError(HTTPStatusError):
    """Raised for 4xx responses; the request should not be retried without modification."""
    pass


class FatalHTTPError(HTTPStatusError):
    """Raised for 5xx responses; an internal server error occurred."""
    pass
