"""
HTTP client using the requests library.
"""
import logging
from typing import Any, Optional

import requests

from .base_client import HttpClient
from .response import HttpResponse

logger = logging.getLogger(__name__)


class RequestsHttpClient(HttpClient):
    """Sends each request over its own TLS connection.

    Redirects are not followed so that 3xx statuses reach the caller.
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Seconds to wait for the server; None waits indefinitely
        """
        self.timeout = timeout

    def request(self, verb: str, url: str, body: Optional[Any] = None) -> HttpResponse:
        verb = verb.lower()
        if verb not in ('get', 'post'):
            raise ValueError(f"Unsupported HTTP verb '{verb}'")

        logger.debug(f"{verb.upper()} {url.split('?', 1)[0]}")
        response = requests.request(
            verb,
            url,
            json=body,
            headers={'Content-Type': 'application/json'},
            timeout=self.timeout,
            allow_redirects=False,
        )
        logger.debug(f"  - Response Status: {response.status_code}")

        return HttpResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
            url=url,
        )
