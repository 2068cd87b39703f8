"""
Request value passed from callers through ApiService to a Transport.
"""

import json as jsonlib
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from requests.structures import CaseInsensitiveDict


class Request:
    """
    A single API request.

    Callers set method, path, params and body; ApiService injects the base
    URI, TLS policy and headers before handing it to the transport.
    """

    def __init__(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body=None,
        json=None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            method: HTTP method
            path: URL path, starting with '/'
            params: Query parameters
            body: Raw request body (str or bytes)
            json: JSON-serializable body, mutually exclusive with body
            timeout: Per-request timeout in seconds (None uses the service default)
        """
        if body is not None and json is not None:
            raise ValueError("pass either body or json, not both")

        self.method = method.upper()
        self.path = path if path.startswith('/') else '/' + path
        self.params = dict(params or {})
        self.body = self._prepare_body(json_data=json, data=body)
        self.timeout = timeout
        self.base_uri = ""
        self.insecure_skip_verify = False
        self.headers = CaseInsensitiveDict()

    @staticmethod
    def _prepare_body(json_data=None, data=None) -> bytes:
        """Prepare request body for signing."""
        if json_data is not None:
            return jsonlib.dumps(json_data, separators=(',', ':')).encode('utf-8')
        elif data is not None:
            if isinstance(data, str):
                return data.encode('utf-8')
            elif isinstance(data, bytes):
                return data
            else:
                raise TypeError(
                    f"body must be str or bytes, got {type(data).__name__}; use json= for structured data"
                )
        else:
            return b''

    def query_string(self) -> str:
        """Canonical query string: keys sorted ascending, sequences expanded."""
        if not self.params:
            return ""
        return urlencode(sorted(self.params.items()), doseq=True)

    def request_uri(self) -> str:
        """Path plus canonical query string; this is what gets signed."""
        query = self.query_string()
        if query:
            return f"{self.path}?{query}"
        return self.path

    def full_url(self) -> str:
        return self.base_uri + self.request_uri()

    def __repr__(self):
        return f"<Request {self.method} {self.path}>"
