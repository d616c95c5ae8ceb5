"""
Unit test configuration.

Unit tests never touch the network: HTTP goes through InMemoryHttpClient and
public keys come from a dictionary-backed KeyFetcher.
"""

import pytest
import requests


@pytest.fixture(autouse=True)
def block_network(monkeypatch):
    """Fail loudly if a unit test reaches the real requests transport."""
    def _blocked(*args, **kwargs):
        raise RuntimeError("Network access is disabled in unit tests")
    monkeypatch.setattr(requests, "request", _blocked)
