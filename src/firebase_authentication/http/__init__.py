"""
HTTP client package.

Provides a consistent interface for the REST client and key fetcher whether
requests go over the network or are served from memory in tests.
"""

from .base_client import HttpClient
from .in_memory_client import InMemoryHttpClient
from .requests_client import RequestsHttpClient
from .response import HttpResponse
from .status import raise_for_status

__all__ = [
    'HttpClient',
    'InMemoryHttpClient',
    'RequestsHttpClient',
    'HttpResponse',
    'raise_for_status',
]
