"""
Firebase Auth REST API client.

Query the Firebase Auth backend through the Identity Toolkit REST API.

Usage:
    service = Service(ServiceConfig.from_settings())
    service.sign_up(email, password)

See https://firebase.google.com/docs/reference/rest/auth
"""
import logging
from typing import Any, Dict, Optional, Union

from . import endpoints
from .config import ServiceConfig
from .http import HttpClient, HttpResponse, RequestsHttpClient, raise_for_status


class Service:
    """Identity Toolkit REST API wrapper keyed by API key.

    Every method returns the raw HttpResponse of a 2xx answer and raises
    otherwise:
        RetriableHTTPError: An error occurred on the server and the request can be retried
        ClientHTTPError: The request is invalid and should not be retried without modification
        FatalHTTPError: An internal server error occurred
    """

    def __init__(self, config: Union[ServiceConfig, str], http_client: Optional[HttpClient] = None,
                 logger: Optional[logging.Logger] = None):
        """Initialize the REST client.

        Args:
            config: ServiceConfig or a bare Firebase Web API key
            http_client: Transport; defaults to RequestsHttpClient
            logger: Logger; defaults to this module's logger
        """
        if isinstance(config, str):
            config = ServiceConfig(api_key=config)
        self.config = config
        self.http_client = http_client or RequestsHttpClient()
        self.logger = logger or logging.getLogger(__name__)

    def change_email(self, token: str, email: str) -> HttpResponse:
        """Change a user's email.

        Args:
            token: A Firebase Auth ID token for the user
            email: The user's new email
        """
        return self.fetch('post', endpoints.UPDATE_ACCOUNT_INFO,
                          {'idToken': token, 'email': email, 'returnSecureToken': True})

    def change_password(self, token: str, password: str) -> HttpResponse:
        """Change a user's password.

        Args:
            token: A Firebase Auth ID token for the user
            password: The user's new password
        """
        return self.fetch('post', endpoints.UPDATE_ACCOUNT_INFO,
                          {'idToken': token, 'password': password, 'returnSecureToken': True})

    def delete_account(self, token: str) -> HttpResponse:
        """Delete the user identified by the ID token."""
        return self.fetch('post', endpoints.DELETE_ACCOUNT, {'idToken': token})

    def exchange_custom_token(self, token: str) -> HttpResponse:
        """Exchange a custom token for an ID and refresh token pair."""
        return self.fetch('post', endpoints.VERIFY_CUSTOM_TOKEN,
                          {'token': token, 'returnSecureToken': True})

    def fetch_providers_for_email(self, email: str, continue_uri: str) -> HttpResponse:
        """Look up the sign-in providers linked to an email.

        Args:
            email: User's email address
            continue_uri: URI the IdP redirects the user back to
        """
        return self.fetch('post', endpoints.FETCH_PROVIDERS_FOR_EMAIL,
                          {'identifier': email, 'continueUri': continue_uri})

    def get_account_info(self, token: str) -> HttpResponse:
        """Get the data of the user identified by the ID token."""
        return self.fetch('post', endpoints.GET_ACCOUNT_INFO, {'idToken': token})

    def send_password_reset_email(self, email: str) -> HttpResponse:
        return self.fetch('post', endpoints.RESET_PASSWORD,
                          {'requestType': 'PASSWORD_RESET', 'email': email})

    def sign_in_email(self, email: str, password: str) -> HttpResponse:
        """Sign in a user with email and password."""
        return self.fetch('post', endpoints.SIGN_IN_EMAIL,
                          {'email': email, 'password': password, 'returnSecureToken': True})

    def sign_in_oauth(self, request_uri: str, post_body: str, return_idp_credential: bool = True) -> HttpResponse:
        """Sign in a user with an OAuth credential.

        Args:
            request_uri: URI the IdP redirects the user back to
            post_body: The IdP credential, e.g. "id_token=...&providerId=google.com"
            return_idp_credential: Whether to return the OAuth credential on failure
        """
        return self.fetch('post', endpoints.SIGN_IN_OAUTH, {
            'requestUri': request_uri,
            'postBody': post_body,
            'returnSecureToken': True,
            'returnIdpCredential': return_idp_credential,
        })

    def sign_up(self, email: str, password: str) -> HttpResponse:
        """Sign up a new user with email and password."""
        return self.fetch('post', endpoints.SIGN_UP_EMAIL,
                          {'email': email, 'password': password, 'returnSecureToken': True})

    def fetch(self, verb: str, action: str, body: Optional[Dict[str, Any]] = None) -> HttpResponse:
        """Send a JSON request to an accounts action and check its status.

        Args:
            verb: 'get' or 'post'
            action: Identity Toolkit action, e.g. 'signUp'
            body: JSON request body

        Raises:
            ValueError: If the verb is not supported
            HTTPStatusError: If the response status is not 2xx
        """
        verb = verb.lower()
        if verb not in ('get', 'post'):
            raise ValueError(f"Unsupported HTTP verb '{verb}'")

        url = endpoints.build_url(action, self.config.api_key)
        self.logger.debug(f"Calling accounts:{action}")
        response = self.http_client.request(verb, url, body)
        if not response.ok:
            self.logger.warning(f"accounts:{action} failed with HTTP {response.status_code}")
        return raise_for_status(response)
