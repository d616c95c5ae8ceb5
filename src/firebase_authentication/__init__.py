"""
Firebase Authentication client.

Provides:
- ID token verification against Google's public certificates (verifier.py)
- Custom token signing with a service account key (custom_token.py)
- A thin wrapper over the Identity Toolkit REST API (service.py)
"""

# Signing algorithm used by Firebase ID tokens and custom tokens
ALGORITHM = "RS256"

# ID token issuer is this prefix followed by the Firebase project ID
ISSUER_BASE_URL = "https://securetoken.google.com/"

# Public x509 certificates for the keys that sign Firebase ID tokens
CLIENT_CERT_URL = "https://www.googleapis.com/robot/v1/metadata/x509/securetoken@system.gserviceaccount.com"

CUSTOM_TOKEN_AUDIENCE = "https://identitytoolkit.googleapis.com/google.identity.identitytoolkit.v1.IdentityToolkit"
CUSTOM_TOKEN_LIFETIME_SECONDS = 60 * 60

# Firebase rejects uids longer than this
MAX_SUBJECT_LENGTH = 128

from .config import FirebaseConfig, ServiceConfig
from .custom_token import CustomTokenIssuer
from .models import DecodedToken, VerificationResult
from .service import Service
from .verifier import Verifier

__all__ = [
    'ALGORITHM',
    'ISSUER_BASE_URL',
    'CLIENT_CERT_URL',
    'CUSTOM_TOKEN_AUDIENCE',
    'CUSTOM_TOKEN_LIFETIME_SECONDS',
    'MAX_SUBJECT_LENGTH',
    'FirebaseConfig',
    'ServiceConfig',
    'CustomTokenIssuer',
    'DecodedToken',
    'VerificationResult',
    'Service',
    'Verifier',
]
