"""
Response envelope shared by every KuCoin endpoint: {"code", "msg", "data"}.
"""

import json
from typing import Any, Callable, Optional

import requests

from .constants import API_SUCCESS_CODE
from .exceptions import ApiError, ResponseDecodeError


class ApiResponse:
    """
    Decoded API envelope plus the HTTP response it came from.

    `data` is left as decoded JSON; callers shape it per endpoint with
    read_data().
    """

    def __init__(self, response: requests.Response, code: str = "", message: str = "", data: Any = None):
        self.response = response
        self.code = code
        self.message = message
        self.data = data

    @classmethod
    def from_response(cls, response: requests.Response) -> "ApiResponse":
        """
        Decode an HTTP response body into an envelope.

        Raises:
            ResponseDecodeError: If the body is not a JSON object
        """
        try:
            payload = json.loads(response.content)
        except ValueError as e:
            raise ResponseDecodeError(
                f"invalid JSON body (HTTP {response.status_code}): {e}"
            ) from e

        if not isinstance(payload, dict):
            raise ResponseDecodeError(
                f"expected a JSON object, got {type(payload).__name__}"
            )

        code = payload.get('code')
        return cls(
            response,
            code="" if code is None else str(code),
            message=payload.get('msg') or "",
            data=payload.get('data'),
        )

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def http_successful(self) -> bool:
        return self.response.status_code == 200

    def api_successful(self) -> bool:
        return self.code == API_SUCCESS_CODE

    def read_data(self, decoder: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        Return the envelope data, optionally passed through a decoder.

        Raises:
            ApiError: If the HTTP status or the envelope code is not a success
        """
        if not self.http_successful() or not self.api_successful():
            raise ApiError(self.code, self.message, self.status_code)
        if decoder is None:
            return self.data
        return decoder(self.data)

    def __repr__(self):
        return f"<ApiResponse [{self.status_code}] code={self.code!r} msg={self.message!r}>"
