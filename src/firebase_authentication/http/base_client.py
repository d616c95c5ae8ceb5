"""
Base HTTP client abstract class.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

from .response import HttpResponse


class HttpClient(ABC):
    """Abstract base class for HTTP clients.

    Implementations send a single request and return the response without
    interpreting its status code.
    """

    @abstractmethod
    def request(self, verb: str, url: str, body: Optional[Any] = None) -> HttpResponse:
        """Send a request with an optional JSON body."""
        pass

    def get(self, url: str) -> HttpResponse:
        return self.request('get', url)

    def post(self, url: str, body: Optional[Any] = None) -> HttpResponse:
        return self.request('post', url, body)
