"""
HTTP transports.

ApiService depends only on the Transport interface; RequestsTransport is
the default implementation and tests substitute their own.
"""

import abc
import logging
from typing import Optional

import requests

from .exceptions import HTTPError
from .request import Request

logger = logging.getLogger(__name__)


class Transport(abc.ABC):
    """Performs one HTTP round-trip for a prepared Request."""

    @abc.abstractmethod
    def request(self, request: Request, timeout: Optional[float]) -> requests.Response:
        """
        Send the request and return the HTTP response.

        Raises:
            HTTPError (or any transport-specific exception) on failure
        """

    def close(self):
        """Release transport resources."""


class RequestsTransport(Transport):
    """Transport backed by a requests.Session."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def request(self, request: Request, timeout: Optional[float]) -> requests.Response:
        # Send the exact URI that was signed; params= would re-encode it
        url = request.full_url()
        logger.debug("%s %s (timeout=%s)", request.method, url, timeout)
        try:
            return self.session.request(
                request.method,
                url,
                data=request.body or None,
                headers=dict(request.headers),
                timeout=timeout,
                verify=not request.insecure_skip_verify,
            )
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()
