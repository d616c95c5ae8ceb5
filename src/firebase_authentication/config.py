"""
Firebase Configuration

Immutable configuration objects injected into the verifier, custom token
issuer and REST client. Use the from_settings() constructors to load them
from the runtime settings.
"""
from dataclasses import dataclass, field
from typing import Optional

from . import ISSUER_BASE_URL
from .settings import get_setting


@dataclass(frozen=True)
class ServiceConfig:
    """Identity Toolkit REST API configuration."""
    api_key: str

    @classmethod
    def from_settings(cls) -> 'ServiceConfig':
        """Load the API key from the 'api-key' setting.

        Raises:
            SettingValueNotFoundException: If FIREBASE_API_KEY is not set.
        """
        return cls(api_key=get_setting('api-key'))


@dataclass(frozen=True)
class FirebaseConfig:
    """Project and service account configuration.

    project_id is required for ID token verification; client_email and
    private_key are only needed to sign custom tokens.
    """
    project_id: str
    client_email: Optional[str] = None
    private_key: Optional[str] = field(default=None, repr=False)

    def __post_init__(self):
        # Keys stored in env vars usually carry literal "\n" sequences
        if self.private_key and '\\n' in self.private_key:
            object.__setattr__(self, 'private_key', self.private_key.replace('\\n', '\n'))

    @property
    def issuer(self) -> str:
        """Expected 'iss' claim of ID tokens for this project."""
        return ISSUER_BASE_URL + self.project_id

    @classmethod
    def from_settings(cls) -> 'FirebaseConfig':
        """Load project and service account settings.

        Raises:
            SettingValueNotFoundException: If FIREBASE_PROJECT_ID is not set.
        """
        return cls(
            project_id=get_setting('project-id'),
            client_email=get_setting('client-email'),
            private_key=get_setting('private-key'),
        )
