"""
KuCoin REST API client.

Builds HMAC-signed requests, sends them through a pluggable transport and
decodes the uniform {code, msg, data} response envelope.

Example usage:
    from kucoin_client import ApiConfig, ApiService

    service = ApiService(ApiConfig(key="...", secret="...", passphrase="..."))
    accounts = service.get("/api/v1/accounts").read_data()
"""

from .config import ApiConfig
from .exceptions import (
    KucoinClientError,
    ConfigurationError,
    HTTPError,
    ResponseDecodeError,
    RequestAssemblyError,
    ApiError
)
from .constants import (
    API_BASE_URI,
    API_SUCCESS_CODE,
    HEADER_API_KEY,
    HEADER_API_PASSPHRASE,
    HEADER_API_TIMESTAMP,
    HEADER_API_SIGN,
    HEADER_API_KEY_VERSION,
    PASSPHRASE_PLAIN,
    PASSPHRASE_SIGNED,
    DEFAULT_CONFIG
)
from .request import Request
from .response import ApiResponse
from .service import ApiService
from .signer import Signer
from .transport import Transport, RequestsTransport

__version__ = "1.0.0"
__all__ = [
    "ApiConfig",
    "ApiService",
    "ApiResponse",
    "Request",
    "Signer",
    "Transport",
    "RequestsTransport",
    "KucoinClientError",
    "ConfigurationError",
    "HTTPError",
    "ResponseDecodeError",
    "RequestAssemblyError",
    "ApiError",
    "API_BASE_URI",
    "API_SUCCESS_CODE",
    "HEADER_API_KEY",
    "HEADER_API_PASSPHRASE",
    "HEADER_API_TIMESTAMP",
    "HEADER_API_SIGN",
    "HEADER_API_KEY_VERSION",
    "PASSPHRASE_PLAIN",
    "PASSPHRASE_SIGNED",
    "DEFAULT_CONFIG"
]
