"""Unit tests for banking request construction.

Tests cover:
- Transfer payload: exact field names, two-decimal amount
- Transfer wire body: compact JSON, byte-exact
- Headers: Content-Type, Accept, optional Bearer token
- URLs and per-request timeouts

Architecture:
- Pure functions, nothing is sent
- Inspects httpx.Request objects directly
"""

import json
from decimal import Decimal

import httpx
import pytest

from bankclient.domain.value_objects import ClientConfig, Credential, TransferRequest
from bankclient.infrastructure.banking.request_builder import (
    build_account_validation_request,
    build_auth_request,
    build_transfer_payload,
    build_transfer_request,
    serialize_transfer_payload,
)

CONFIG = ClientConfig("http://bank.test", 7.5)


def _request(amount: str = "100") -> TransferRequest:
    return TransferRequest(
        from_account="ACC1000", to_account="ACC1001", amount=Decimal(amount)
    )


# =============================================================================
# Transfer Payload
# =============================================================================


@pytest.mark.unit
class TestBuildTransferPayload:
    """Test build_transfer_payload."""

    def test_has_exactly_three_camel_case_fields(self):
        payload = build_transfer_payload(_request())

        assert set(payload) == {"fromAccount", "toAccount", "amount"}
        assert payload["fromAccount"] == "ACC1000"
        assert payload["toAccount"] == "ACC1001"

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [("100", "100.00"), ("0.5", "0.50"), ("1.005", "1.01"), ("999999.999", "1000000.00")],
    )
    def test_amount_quantized_to_cents(self, amount: str, expected: str):
        """Amounts are rounded half-up to two fractional digits."""
        payload = build_transfer_payload(_request(amount))

        assert str(payload["amount"]) == expected


@pytest.mark.unit
class TestSerializeTransferPayload:
    """Test serialize_transfer_payload."""

    def test_exact_wire_format(self):
        """Compact JSON, fixed key order, amount as a two-decimal number."""
        body = serialize_transfer_payload(build_transfer_payload(_request()))

        assert body == '{"fromAccount":"ACC1000","toAccount":"ACC1001","amount":100.00}'

    def test_output_is_valid_json(self):
        body = serialize_transfer_payload(build_transfer_payload(_request("42.5")))

        assert json.loads(body) == {
            "fromAccount": "ACC1000",
            "toAccount": "ACC1001",
            "amount": 42.5,
        }

    def test_large_amount_not_in_exponent_form(self):
        body = serialize_transfer_payload(build_transfer_payload(_request("1E+6")))

        assert body.endswith('"amount":1000000.00}')


# =============================================================================
# Requests
# =============================================================================


@pytest.mark.unit
class TestBuildTransferRequest:
    """Test build_transfer_request."""

    def test_method_url_and_body(self):
        request = build_transfer_request(CONFIG, build_transfer_payload(_request()))

        assert request.method == "POST"
        assert str(request.url) == "http://bank.test/transfer"
        assert request.content == (
            b'{"fromAccount":"ACC1000","toAccount":"ACC1001","amount":100.00}'
        )
        assert request.headers["Content-Type"] == "application/json"

    def test_no_authorization_without_credential(self):
        request = build_transfer_request(CONFIG, build_transfer_payload(_request()))

        assert "Authorization" not in request.headers

    def test_bearer_token_attached(self):
        credential = Credential(token="tok", expires_in=3600)

        request = build_transfer_request(
            CONFIG, build_transfer_payload(_request()), credential
        )

        assert request.headers["Authorization"] == "Bearer tok"

    def test_timeout_extension_matches_config(self):
        request = build_transfer_request(CONFIG, build_transfer_payload(_request()))

        assert request.extensions["timeout"] == httpx.Timeout(7.5).as_dict()


@pytest.mark.unit
class TestBuildAccountValidationRequest:
    """Test build_account_validation_request."""

    def test_get_with_account_in_path(self):
        request = build_account_validation_request(CONFIG, "ACC1000")

        assert request.method == "GET"
        assert str(request.url) == "http://bank.test/accounts/validate/ACC1000"
        assert request.headers["Accept"] == "application/json"
        assert request.content == b""

    def test_bearer_token_attached_when_authenticated(self):
        credential = Credential(token="tok", expires_in=60)

        request = build_account_validation_request(CONFIG, "ACC1000", credential)

        assert request.headers["Authorization"] == "Bearer tok"


@pytest.mark.unit
class TestBuildAuthRequest:
    """Test build_auth_request."""

    def test_posts_empty_json_object(self):
        request = build_auth_request(CONFIG)

        assert request.method == "POST"
        assert str(request.url) == "http://bank.test/authToken"
        assert request.content == b"{}"
        assert request.headers["Content-Type"] == "application/json"
        assert "Authorization" not in request.headers
