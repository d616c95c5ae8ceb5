"""
Custom token signing.

Custom tokens are minted by a backend with a service account key and
exchanged by clients for an ID and refresh token pair.
"""
import logging
import time
from typing import Any, Dict, Optional

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import load_pem_private_key

from . import ALGORITHM, CUSTOM_TOKEN_AUDIENCE, CUSTOM_TOKEN_LIFETIME_SECONDS
from .config import FirebaseConfig
from .exceptions import ConfigurationError, PrivateKeyError


class CustomTokenIssuer:
    """Signs custom tokens with the configured service account."""

    def __init__(self, config: FirebaseConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

    def create_custom_token(self, uid: str, claims: Optional[Dict[str, Any]] = None) -> str:
        """
        Create a signed custom token for the given uid.

        Args:
            uid: The uid the token is issued for
            claims: Additional claims made available to security rules

        Returns:
            str: Encoded RS256 JWT valid for one hour

        Raises:
            ConfigurationError: If the service account email is not configured
            PrivateKeyError: If the private key is missing or cannot be parsed
        """
        service_account_email = self.config.client_email
        if not service_account_email:
            raise ConfigurationError("Service account email is required to create custom tokens")

        private_key = self._load_private_key()
        now_seconds = int(time.time())
        payload = {
            'iss': service_account_email,
            'sub': service_account_email,
            'aud': CUSTOM_TOKEN_AUDIENCE,
            'iat': now_seconds,
            'exp': now_seconds + CUSTOM_TOKEN_LIFETIME_SECONDS,
            'uid': uid,
            'claims': claims or {},
        }

        self.logger.debug(f"Creating custom token for uid {uid}")
        return jwt.encode(payload, private_key, algorithm=ALGORITHM)

    def _load_private_key(self):
        if not self.config.private_key:
            raise PrivateKeyError("Service account private key is required to create custom tokens")
        try:
            private_key = load_pem_private_key(self.config.private_key.encode(), password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise PrivateKeyError(f"Could not parse service account private key: {e}") from e
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise PrivateKeyError(
                f"Service account private key must be an RSA key, got {type(private_key).__name__}"
            )
        return private_key
