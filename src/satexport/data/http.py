"""Blocking HTTP text fetches shared by the catalog and launch clients."""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)


class FetchError(requests.RequestException):
    """A page or catalog could not be fetched.

    Attributes:
        url: The requested URL.
        status_code: HTTP status, or None for transport failures.
        body: Response body returned with a non-200 status.
    """

    def __init__(self, url: str, status_code: int | None = None, body: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"Failed to fetch {url}"
        else:
            message = f"HTTP error code {status_code} for {url}: {body}"
        super().__init__(message)


def fetch_text(session: requests.Session, url: str, *, timeout: float | None) -> str:
    """GET a URL and return its body as text.

    The response is closed before returning or raising.

    Args:
        session: Session carrying default headers.
        url: URL to fetch.
        timeout: Seconds to wait for the server, or None to wait forever.

    Returns:
        The response body.

    Raises:
        FetchError: On a non-200 status or a transport failure.
    """
    logger.debug("GET %s", url)
    try:
        with session.get(url, timeout=timeout) as response:
            if response.status_code != 200:
                raise FetchError(url, response.status_code, response.text)
            return response.text
    except FetchError:
        raise
    except requests.RequestException as e:
        raise FetchError(url) from e
