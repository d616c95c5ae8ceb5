"""
Root pytest configuration for firebase-authentication.
"""

import pytest

# Auto-bootstrap logging for all tests
from firebase_authentication.logging import bootstrap_logging
bootstrap_logging()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start every test from the environment."""
    from firebase_authentication.settings import clear_cache
    clear_cache()
    yield
    clear_cache()
