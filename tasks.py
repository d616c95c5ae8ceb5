"""Task definitions for firebase-authentication.

Run from the repository root, e.g. `invoke verify-token --token=...`.
"""

from firebase_authentication.tasks import verify_token, custom_token, show_settings
