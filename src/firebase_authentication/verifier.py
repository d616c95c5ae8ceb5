"""
Handles the core logic for verifying Firebase ID tokens.
"""
import hashlib
import logging
from typing import Any, Dict, Optional

import jwt
from cryptography.x509 import load_pem_x509_certificate

from . import ALGORITHM, MAX_SUBJECT_LENGTH
from .config import FirebaseConfig
from .exceptions import (
    EmptySubjectError,
    IncorrectAlgorithmError,
    IncorrectAudienceError,
    IncorrectIssuerError,
    InvalidTokenInputError,
    KeyFetchError,
    MissingKidError,
    MissingSubjectError,
    SubjectTooLongError,
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
    UnknownKeyIdError,
)
from .keys import GoogleCertKeyFetcher, KeyFetcher
from .models import DecodedToken, VerificationResult


def log_token_safely(logger: logging.Logger, token: str, context: str = "Token"):
    """Log identifying info about a token without logging the token itself."""
    token_hash = hashlib.sha256(token.encode()).hexdigest()[:16]
    logger.debug(f"{context}: {len(token)} chars, hash {token_hash}")


class Verifier:
    """Verifies Firebase ID tokens against Google's public certificates.

    Usage:
        verifier = Verifier(FirebaseConfig.from_settings())
        result = verifier.verify(id_token)
        result.uid
    """

    def __init__(self, config: FirebaseConfig, key_fetcher: Optional[KeyFetcher] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config
        self.key_fetcher = key_fetcher or GoogleCertKeyFetcher()
        self.logger = logger or logging.getLogger(__name__)

    def verify(self, token: str) -> VerificationResult:
        """
        Verify an ID token and return its uid and decoded contents.

        Checks run in order and stop at the first failure: input type,
        structure, header, payload claims, public key lookup, signature.

        Raises:
            AuthenticationError: A subclass describing the first failed check.
            KeyFetchError: If the public certificates cannot be retrieved.
        """
        if not isinstance(token, str):
            raise InvalidTokenInputError("id token must be a String")
        log_token_safely(self.logger, token, "Verifying ID token")

        unverified = self._decode_unverified(token)
        self.logger.debug(f"  - Header: {unverified.header}")
        self._validate_header(unverified.header)
        self.logger.debug(f"  - Issuer: {unverified.payload.get('iss')}, audience: {unverified.payload.get('aud')}")
        self._validate_payload(unverified.payload)

        kid = unverified.header['kid']
        public_keys = self.key_fetcher.fetch_keys()
        certificate_pem = public_keys.get(kid)
        self.logger.debug(f"  - Key lookup for kid {kid}: {'found' if certificate_pem is not None else 'not found'}")
        if certificate_pem is None:
            raise UnknownKeyIdError(
                'Firebase ID token has "kid" claim which does not correspond to a known public key. '
                "Most likely the ID token is expired, so get a fresh token from your client app and try again."
            )

        if not isinstance(certificate_pem, str):
            raise KeyFetchError(f"Public certificate for kid {kid} is not a PEM string.")

        decoded_token = self._decode_verified(token, certificate_pem)
        uid = decoded_token.payload['sub']
        self.logger.debug(f"  - Verified token for uid {uid}")
        return VerificationResult(uid=uid, decoded_token=decoded_token)

    def _decode_unverified(self, token: str) -> DecodedToken:
        try:
            header = jwt.get_unverified_header(token)
            payload = jwt.decode(token, options={"verify_signature": False})
        except jwt.InvalidTokenError as e:
            self.logger.debug(f"  - ERROR: Token could not be decoded: {e}")
            raise TokenMalformedError(f"Firebase ID token is malformed. {e}") from e
        return DecodedToken(header=header, payload=payload)

    def _decode_verified(self, token: str, certificate_pem: str) -> DecodedToken:
        try:
            certificate = load_pem_x509_certificate(certificate_pem.encode())
        except ValueError as e:
            raise KeyFetchError(f"Public certificate for Firebase ID token could not be parsed. {e}") from e
        try:
            payload = jwt.decode(
                token,
                certificate.public_key(),
                algorithms=[ALGORITHM],
                audience=self.config.project_id,
                options={"verify_iat": True},
            )
        except jwt.ExpiredSignatureError as e:
            self.logger.debug(f"  - ERROR: Token has expired: {e}")
            raise TokenExpiredError(
                f"Firebase ID token has expired. Get a fresh token from your client app and try again. {e}"
            ) from e
        except (jwt.InvalidAudienceError, jwt.DecodeError) as e:
            self.logger.debug(f"  - ERROR: Signature verification failed: {e}")
            raise TokenSignatureError(f"Firebase JWT Error. {e}") from e
        except jwt.InvalidTokenError as e:
            self.logger.debug(f"  - ERROR: Verified decode failed: {e}")
            raise TokenSignatureError(f"Firebase ID token has invalid signature. {e}") from e
        self.logger.debug("  - Signature verified")
        return DecodedToken(header=jwt.get_unverified_header(token), payload=payload)

    def _validate_header(self, header: Dict[str, Any]):
        if not header.get('kid'):
            raise MissingKidError('Firebase ID token has no "kid" claim.', claim='kid')

        alg = header.get('alg')
        if alg != ALGORITHM:
            raise IncorrectAlgorithmError(
                f'Firebase ID token has incorrect algorithm. Expected "{ALGORITHM}" but got "{alg}".',
                claim='alg', expected=ALGORITHM, actual=alg,
            )

    def _validate_payload(self, payload: Dict[str, Any]):
        project_id = self.config.project_id
        aud = payload.get('aud')
        if aud != project_id:
            raise IncorrectAudienceError(
                f"Firebase ID token has incorrect 'aud' (audience) claim. "
                f'Expected "{project_id}" but got "{aud}".',
                claim='aud', expected=project_id, actual=aud,
            )

        issuer = self.config.issuer
        iss = payload.get('iss')
        if iss != issuer:
            raise IncorrectIssuerError(
                f"Firebase ID token has incorrect 'iss' (issuer) claim. "
                f'Expected "{issuer}" but got "{iss}".',
                claim='iss', expected=issuer, actual=iss,
            )

        sub = payload.get('sub')
        if not isinstance(sub, str):
            raise MissingSubjectError('Firebase ID token has no "sub" (subject) claim.', claim='sub', actual=sub)
        if not sub:
            raise EmptySubjectError('Firebase ID token has an empty string "sub" (subject) claim.',
                                    claim='sub', actual=sub)
        if len(sub) > MAX_SUBJECT_LENGTH:
            raise SubjectTooLongError(
                f'Firebase ID token has "sub" (subject) claim longer than {MAX_SUBJECT_LENGTH} characters.',
                claim='sub', expected=MAX_SUBJECT_LENGTH, actual=len(sub),
            )
