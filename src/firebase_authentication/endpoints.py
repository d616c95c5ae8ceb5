"""Identity Toolkit REST API actions."""

BASE_URI = "https://identitytoolkit.googleapis.com/v1/accounts:"

GET_ACCOUNT_INFO = "lookup"
DELETE_ACCOUNT = "delete"
FETCH_PROVIDERS_FOR_EMAIL = "createAuthUri"
RESET_PASSWORD = "sendOobCode"
SIGN_IN_EMAIL = "signInWithPassword"
SIGN_IN_OAUTH = "signInWithIdp"
SIGN_UP_EMAIL = "signUp"
UPDATE_ACCOUNT_INFO = "update"
VERIFY_CUSTOM_TOKEN = "signInWithCustomToken"


def build_url(action: str, api_key: str) -> str:
    return f"{BASE_URI}{action}?key={api_key}"
