"""Public IP lookup (single blocking HTTP GET).

The endpoint answers with the caller's apparent public address as plain text.
No retries, no caching: one request, one answer or one error.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.exit_codes import ExitCode

logger = logging.getLogger(__name__)


class PublicIPLookupError(Exception):
    """Base error for the lookup; carries the message and exit code to report."""

    message = "Public IP lookup failed"
    exit_code = ExitCode.INVALID_RESPONSE

    def __str__(self) -> str:
        return self.message


class EndpointUnreachableError(PublicIPLookupError):
    message = "Couldn't reach the page"
    exit_code = ExitCode.ENDPOINT_UNREACHABLE


class InvalidResponseError(PublicIPLookupError):
    message = "Invalid HTTP response"
    exit_code = ExitCode.INVALID_RESPONSE


def decode_body(response: httpx.Response) -> str:
    """Strictly decode the body with the declared charset (UTF-8 when absent)."""

    encoding = response.charset_encoding or "utf-8"
    try:
        return response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise InvalidResponseError() from exc


def fetch_public_ip(
    *,
    settings: AppSettings | None = None,
    client: httpx.Client | None = None,
) -> str:
    """Return the response body of the public IP endpoint, verbatim.

    Raises:
    - `EndpointUnreachableError` on DNS/TCP/TLS/timeout failures.
    - `InvalidResponseError` on a non-2xx status or an undecodable body.
    """

    settings = settings or AppSettings()
    url = settings.public_ip_url

    owns_client = client is None
    client = client or build_client(settings)
    try:
        response = client.get(url)
    except httpx.DecodingError as exc:
        logger.debug("Could not decode response from %s: %s", url, exc)
        raise InvalidResponseError() from exc
    except httpx.RequestError as exc:
        logger.debug("Request to %s failed: %r", url, exc)
        raise EndpointUnreachableError() from exc
    finally:
        if owns_client:
            client.close()

    logger.debug("GET %s -> HTTP %s", url, response.status_code)
    if not response.is_success:
        raise InvalidResponseError()
    return decode_body(response)
