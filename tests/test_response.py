"""
Unit tests for the ApiResponse envelope.
"""

import pytest

from kucoin_client import ApiResponse, ApiError, ResponseDecodeError


class TestApiResponse:
    """Test envelope decoding and data access."""

    def test_from_response(self, response_factory, ok_payload):
        http_response = response_factory(ok_payload)
        envelope = ApiResponse.from_response(http_response)

        assert envelope.code == "200000"
        assert envelope.message == ""
        assert envelope.data == ok_payload["data"]
        assert envelope.response is http_response
        assert envelope.status_code == 200

    def test_msg_maps_to_message(self, response_factory):
        envelope = ApiResponse.from_response(
            response_factory({"code": "400100", "msg": "Invalid parameter"}, status_code=400)
        )

        assert envelope.code == "400100"
        assert envelope.message == "Invalid parameter"
        assert envelope.data is None

    def test_numeric_code_normalized(self, response_factory):
        envelope = ApiResponse.from_response(response_factory({"code": 200000, "data": 1}))

        assert envelope.code == "200000"
        assert envelope.api_successful() is True

    def test_invalid_json(self, response_factory):
        with pytest.raises(ResponseDecodeError):
            ApiResponse.from_response(response_factory(content=b"<html>Bad Gateway</html>", status_code=502))

    def test_empty_body(self, response_factory):
        with pytest.raises(ResponseDecodeError):
            ApiResponse.from_response(response_factory(content=b""))

    def test_non_object_json(self, response_factory):
        with pytest.raises(ResponseDecodeError):
            ApiResponse.from_response(response_factory(content=b"[1, 2, 3]"))

    def test_successful_flags(self, response_factory, ok_payload):
        envelope = ApiResponse.from_response(response_factory(ok_payload))

        assert envelope.http_successful() is True
        assert envelope.api_successful() is True

    def test_read_data(self, response_factory, ok_payload):
        envelope = ApiResponse.from_response(response_factory(ok_payload))

        assert envelope.read_data() == ok_payload["data"]

    def test_read_data_with_decoder(self, response_factory, ok_payload):
        envelope = ApiResponse.from_response(response_factory(ok_payload))

        balances = envelope.read_data(lambda rows: {row["currency"]: row["balance"] for row in rows})
        assert balances == {"BTC": "1.5"}

    def test_read_data_api_error(self, response_factory):
        envelope = ApiResponse.from_response(
            response_factory({"code": "400003", "msg": "KC-API-KEY not exists"}, status_code=401)
        )

        with pytest.raises(ApiError) as excinfo:
            envelope.read_data()

        assert excinfo.value.code == "400003"
        assert excinfo.value.message == "KC-API-KEY not exists"
        assert excinfo.value.status_code == 401

    def test_read_data_http_error_with_success_code(self, response_factory):
        envelope = ApiResponse.from_response(response_factory({"code": "200000", "data": None}, status_code=500))

        with pytest.raises(ApiError):
            envelope.read_data()
