"""
Public key retrieval for ID token verification.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

import requests

from . import CLIENT_CERT_URL
from .exceptions import KeyFetchError
from .http import HttpClient, RequestsHttpClient

logger = logging.getLogger(__name__)


class KeyFetcher(ABC):
    """Abstract source of the kid -> PEM certificate mapping."""

    @abstractmethod
    def fetch_keys(self) -> Dict[str, str]:
        """
        Return the current public key set.

        Raises:
            KeyFetchError: If the key set cannot be retrieved
        """
        pass


class GoogleCertKeyFetcher(KeyFetcher):
    """Fetches Google's securetoken certificates on every call (no caching)."""

    def __init__(self, http_client: Optional[HttpClient] = None, url: str = CLIENT_CERT_URL):
        self.http_client = http_client or RequestsHttpClient()
        self.url = url

    def fetch_keys(self) -> Dict[str, str]:
        logger.debug(f"Fetching public keys from {self.url}")
        try:
            response = self.http_client.get(self.url)
        except requests.RequestException as e:
            raise KeyFetchError(f"Error fetching public keys for Google certs: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise KeyFetchError(
                f"Error fetching public keys for Google certs: invalid response "
                f"(HTTP {response.status_code})"
            ) from e

        if not isinstance(data, dict):
            raise KeyFetchError("Error fetching public keys for Google certs: unexpected response format")

        if data.get('error'):
            msg = f"Error fetching public keys for Google certs: {data['error']}"
            if data.get('error_description'):
                msg += f" ({data['error_description']})"
            raise KeyFetchError(msg)

        if not response.ok:
            raise KeyFetchError(f"Error fetching public keys for Google certs: HTTP {response.status_code}")

        invalid = sorted(kid for kid, cert in data.items() if not isinstance(cert, str))
        if invalid:
            raise KeyFetchError(
                f"Error fetching public keys for Google certs: no PEM certificate for key(s) {', '.join(invalid)}"
            )

        logger.debug(f"  - Fetched {len(data)} public keys")
        return data
