"""
In-memory HTTP client.

Serves canned responses and records every request. Used by the test suite so
that nothing touches the network.
"""
from typing import Any, Dict, List, Optional, Tuple

from .base_client import HttpClient
from .response import HttpResponse


class InMemoryHttpClient(HttpClient):
    """In-memory HTTP client keyed by (verb, url)."""

    def __init__(self, default_response: Optional[HttpResponse] = None):
        """Initialize with an optional fallback response.

        Args:
            default_response: Returned for any request with no registered response
        """
        self.default_response = default_response
        self.responses: Dict[Tuple[str, str], HttpResponse] = {}
        self.requests: List[Dict[str, Any]] = []

    def add_response(self, verb: str, url: str, response: HttpResponse) -> None:
        self.responses[(verb.lower(), url)] = response

    def request(self, verb: str, url: str, body: Optional[Any] = None) -> HttpResponse:
        verb = verb.lower()
        self.requests.append({'verb': verb, 'url': url, 'body': body})

        response = self.responses.get((verb, url), self.default_response)
        if response is None:
            raise LookupError(f"No response registered for {verb.upper()} {url}")
        return response

    @property
    def last_request(self) -> Dict[str, Any]:
        return self.requests[-1]
