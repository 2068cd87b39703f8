"""
Custom exceptions for the KuCoin client library.
"""


class KucoinClientError(Exception):
    """Base exception for KuCoin client errors."""
    pass


class ConfigurationError(KucoinClientError):
    """Raised when client configuration is invalid."""
    pass


class HTTPError(KucoinClientError):
    """Raised when the HTTP round-trip fails."""
    pass


class ResponseDecodeError(KucoinClientError):
    """Raised when a response body is not a JSON envelope."""
    pass


class RequestAssemblyError(KucoinClientError):
    """Raised when a request could not be built or signed; nothing was sent."""
    pass


class ApiError(KucoinClientError):
    """Raised when the API answers with a non-success envelope."""

    def __init__(self, code: str, message: str, status_code: int = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"[HTTP {status_code}] [code {code}] {message}")
