"""
KuCoin API service.

This module assembles signed requests, hands them to a Transport and
decodes the replies into ApiResponse envelopes.
"""

import logging
import time
from typing import Any, Mapping, Optional

from .config import ApiConfig
from .constants import (
    CONTENT_TYPE_JSON,
    HEADER_API_KEY,
    HEADER_API_KEY_VERSION,
    HEADER_API_PASSPHRASE,
    HEADER_API_SIGN,
    HEADER_API_TIMESTAMP,
    HEADER_CONTENT_TYPE,
    PASSPHRASE_SIGNED,
    SIGNED_PASSPHRASE_KEY_VERSION,
)
from .exceptions import RequestAssemblyError
from .request import Request
from .response import ApiResponse
from .signer import Signer
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)


class ApiService:
    """
    Entry point for calling the KuCoin REST API.

    Requests are signed when the configuration carries an API key and sent
    unauthenticated otherwise. The service keeps no per-call state, so one
    instance can be shared as long as its transport can.
    """

    def __init__(self, config: Optional[ApiConfig] = None, transport: Optional[Transport] = None):
        """
        Initialize the service.

        Args:
            config: Connection settings and credentials (defaults to public access)
            transport: HTTP transport (defaults to RequestsTransport)
        """
        self.config = config or ApiConfig()
        self.transport = transport or RequestsTransport()
        self.signer = None
        if self.config.authenticated:
            self.signer = Signer(self.config.secret, self.config.passphrase)

    @classmethod
    def from_env(cls, transport: Optional[Transport] = None, **overrides) -> "ApiService":
        """Build a service from API_* environment variables."""
        return cls(ApiConfig.from_env(**overrides), transport=transport)

    @staticmethod
    def _timestamp() -> str:
        """Current wall-clock time in milliseconds since epoch."""
        return str(int(time.time() * 1000))

    def signing_payload(self, request: Request, timestamp: str, request_uri: Optional[str] = None) -> bytes:
        """Bytes signed for a request: timestamp + method + URI + body."""
        if request_uri is None:
            request_uri = request.request_uri()
        prefix = timestamp + request.method + request_uri
        return prefix.encode('utf-8') + request.body

    def _passphrase_header(self) -> str:
        if self.config.passphrase_mode == PASSPHRASE_SIGNED:
            return self.signer.sign_passphrase().decode('ascii')
        return self.config.passphrase

    def _prepare(self, request: Request) -> str:
        """Inject base URI, TLS policy and headers; return the request URI."""
        request_uri = request.request_uri()
        request.base_uri = self.config.base_uri
        request.insecure_skip_verify = self.config.insecure_skip_verify
        request.headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

        if self.signer is None:
            return request_uri

        timestamp = self._timestamp()
        signature = self.signer.sign(self.signing_payload(request, timestamp, request_uri))
        request.headers[HEADER_API_KEY] = self.config.key
        request.headers[HEADER_API_PASSPHRASE] = self._passphrase_header()
        request.headers[HEADER_API_TIMESTAMP] = timestamp
        request.headers[HEADER_API_SIGN] = signature.decode('ascii')
        if self.config.passphrase_mode == PASSPHRASE_SIGNED:
            request.headers[HEADER_API_KEY_VERSION] = SIGNED_PASSPHRASE_KEY_VERSION
        return request_uri

    def call(self, request: Request) -> ApiResponse:
        """
        Sign and send a request, then decode the reply envelope.

        Args:
            request: Request to send; mutated with base URI and headers

        Returns:
            ApiResponse with the HTTP response attached

        Raises:
            RequestAssemblyError: If building or signing the request failed
            ResponseDecodeError: If the body is not a JSON envelope
            HTTPError: Transport failures are propagated unchanged
        """
        try:
            request_uri = self._prepare(request)
        except Exception as e:
            logger.exception("failed to assemble %s %s", request.method, request.path)
            raise RequestAssemblyError(f"failed to assemble request: {e}") from e

        timeout = request.timeout if request.timeout is not None else self.config.timeout
        logger.debug("calling %s %s", request.method, request_uri)
        response = self.transport.request(request, timeout)

        api_response = ApiResponse.from_response(response)
        if not api_response.api_successful():
            logger.debug("%s %s returned code %s: %s", request.method,
                         request_uri, api_response.code, api_response.message)
        return api_response

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None, **kwargs) -> ApiResponse:
        """Make GET request."""
        return self.call(Request('GET', path, params=params, **kwargs))

    def post(self, path: str, json=None, data=None, **kwargs) -> ApiResponse:
        """Make POST request."""
        return self.call(Request('POST', path, body=data, json=json, **kwargs))

    def put(self, path: str, json=None, data=None, **kwargs) -> ApiResponse:
        """Make PUT request."""
        return self.call(Request('PUT', path, body=data, json=json, **kwargs))

    def delete(self, path: str, params: Optional[Mapping[str, Any]] = None, **kwargs) -> ApiResponse:
        """Make DELETE request."""
        return self.call(Request('DELETE', path, params=params, **kwargs))

    def close(self):
        """Close the transport."""
        if self.transport:
            self.transport.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
