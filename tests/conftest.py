"""
Shared fixtures for KuCoin client tests.
"""

import json

import pytest
import requests

from kucoin_client import ApiConfig, Transport


def make_response(payload=None, status_code=200, content=None):
    """Build a real requests.Response carrying the given body."""
    response = requests.Response()
    response.status_code = status_code
    if content is None:
        content = json.dumps(payload).encode('utf-8')
    response._content = content
    response.headers['Content-Type'] = 'application/json'
    return response


class StubTransport(Transport):
    """Transport returning a canned response (or raising) and recording calls."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def request(self, request, timeout):
        self.calls.append((request, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def ok_payload():
    return {"code": "200000", "data": [{"currency": "BTC", "balance": "1.5"}]}


@pytest.fixture
def stub_transport(ok_payload):
    return StubTransport(make_response(ok_payload))


@pytest.fixture
def auth_config():
    return ApiConfig(
        base_uri="https://openapi-sandbox.kucoin.com",
        key="test-key",
        secret="test-secret",
        passphrase="test-passphrase",
    )


@pytest.fixture
def response_factory():
    """Factory for requests.Response objects with a given body."""
    return make_response


@pytest.fixture
def transport_factory():
    """Factory for stub transports returning or raising canned results."""
    return StubTransport
