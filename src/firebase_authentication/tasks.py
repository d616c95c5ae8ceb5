"""Command-line tasks for verifying ID tokens and signing custom tokens.

Usage:
    invoke verify-token --token=$ID_TOKEN
    invoke custom-token --uid=user123 --claims='{"role": "admin"}'
    invoke show-settings

Results go to stdout; diagnostics go to stderr.
"""

import json
import sys

from invoke import task

from .config import FirebaseConfig
from .custom_token import CustomTokenIssuer
from .exceptions import AuthError
from .logging import bootstrap_logging
from .settings import SettingValueNotFoundException, print_settings
from .verifier import Verifier


@task(help={
    'token': 'Firebase ID token to verify',
    'quiet': 'Suppress status output to stderr',
})
def verify_token(ctx, token=None, quiet=False):
    """
    Verify a Firebase ID token and print its uid and claims as JSON.

    Requires FIREBASE_PROJECT_ID.
    """
    bootstrap_logging(__name__)
    if not token:
        print("Token required. Usage: invoke verify-token --token=<id token>", file=sys.stderr)
        return False

    try:
        result = Verifier(FirebaseConfig.from_settings()).verify(token)
    except (AuthError, SettingValueNotFoundException) as e:
        if not quiet:
            print(f"Verification failed: {e}", file=sys.stderr)
        return False

    print(json.dumps({'uid': result.uid, 'claims': result.decoded_token.payload}, indent=2))
    if not quiet:
        print("Token verified.", file=sys.stderr)
    return True


@task(help={
    'uid': 'uid the custom token is issued for',
    'claims': 'Additional claims as a JSON object',
    'quiet': 'Suppress status output to stderr',
})
def custom_token(ctx, uid=None, claims=None, quiet=False):
    """
    Sign a custom token and print it to stdout.

    Requires FIREBASE_PROJECT_ID, FIREBASE_CLIENT_EMAIL and FIREBASE_PRIVATE_KEY.
    """
    bootstrap_logging(__name__)
    if not uid:
        print("uid required. Usage: invoke custom-token --uid=<uid>", file=sys.stderr)
        return False

    try:
        extra_claims = json.loads(claims) if claims else {}
    except json.JSONDecodeError as e:
        print(f"Invalid --claims JSON: {e}", file=sys.stderr)
        return False

    try:
        token = CustomTokenIssuer(FirebaseConfig.from_settings()).create_custom_token(uid, extra_claims)
    except (AuthError, SettingValueNotFoundException) as e:
        if not quiet:
            print(f"Custom token creation failed: {e}", file=sys.stderr)
        return False

    print(token)
    if not quiet:
        print(f"Custom token created for uid {uid}.", file=sys.stderr)
    return True


@task
def show_settings(ctx):
    """Print the Firebase settings read from the environment, secrets masked."""
    print_settings(file=sys.stdout)
    return True
