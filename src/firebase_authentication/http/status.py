"""Map HTTP status codes to raised errors."""

from ..exceptions import ClientHTTPError, FatalHTTPError, HTTPStatusError, RetriableHTTPError
from .response import HttpResponse


def raise_for_status(response: HttpResponse) -> HttpResponse:
    """Return the response if its status is 2xx, otherwise raise.

    Raises:
        RetriableHTTPError: 3xx; the request can be retried
        ClientHTTPError: 4xx; the request is invalid and should not be retried without modification
        FatalHTTPError: 5xx; an internal server error occurred
        HTTPStatusError: any other non-success status
    """
    status = response.status_code
    if 200 <= status < 300:
        return response

    message = f"{status} response from {response.url.split('?', 1)[0]}: {response.text}"
    if 300 <= status < 400:
        raise RetriableHTTPError(message, response)
    if 400 <= status < 500:
        raise ClientHTTPError(message, response)
    if 500 <= status < 600:
        raise FatalHTTPError(message, response)
    raise HTTPStatusError(message, response)
