"""Request construction for the banking API.

Turns validated inputs into ``httpx.Request`` objects. Building is pure: no
I/O happens here, so every request can be inspected in tests before (or
instead of) being sent.

Endpoints:
    POST /transfer                     - transfer funds
    GET  /accounts/validate/{id}       - check an account exists
    POST /authToken                    - obtain a bearer token

Wire format for transfers (compact JSON, amount with two decimals):
    {"fromAccount":"ACC1000","toAccount":"ACC1001","amount":100.00}
"""

import json
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import httpx

from bankclient.core.constants import (
    ACCOUNT_VALIDATION_PATH,
    AMOUNT_QUANTUM,
    AUTH_TOKEN_PATH,
    BEARER_PREFIX,
    JSON_CONTENT_TYPE,
    TRANSFER_PATH,
)
from bankclient.domain.value_objects import ClientConfig, Credential, TransferRequest

EMPTY_JSON_OBJECT = "{}"


def _timeout_extensions(config: ClientConfig) -> dict[str, Any]:
    return {"timeout": httpx.Timeout(config.timeout).as_dict()}


def _auth_headers(credential: Credential | None) -> dict[str, str]:
    if credential is None:
        return {}
    return {"Authorization": f"{BEARER_PREFIX}{credential.token}"}


def build_transfer_payload(request: TransferRequest) -> dict[str, Any]:
    """Build the wire payload for a transfer.

    Args:
        request: Validated transfer request.

    Returns:
        Dict with exactly ``fromAccount``, ``toAccount`` and ``amount``; the
        amount is a Decimal quantized to two fractional digits.

    Example:
        >>> build_transfer_payload(request)["amount"]
        Decimal('100.00')
    """
    return {
        "fromAccount": request.from_account,
        "toAccount": request.to_account,
        "amount": request.amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP),
    }


def serialize_transfer_payload(payload: dict[str, Any]) -> str:
    """Serialize a transfer payload to compact JSON.

    The standard encoder cannot emit a Decimal as a JSON number with a
    fixed number of fractional digits, so the amount is rendered with
    ``:.2f`` and the string fields are encoded by ``json.dumps``.

    Args:
        payload: Output of ``build_transfer_payload``.

    Returns:
        JSON text, e.g. ``{"fromAccount":"ACC1000","toAccount":"ACC1001","amount":100.00}``.
    """
    amount = Decimal(payload["amount"])
    return (
        "{"
        f'"fromAccount":{json.dumps(payload["fromAccount"])},'
        f'"toAccount":{json.dumps(payload["toAccount"])},'
        f'"amount":{amount:.2f}'
        "}"
    )


def build_transfer_request(
    config: ClientConfig,
    payload: dict[str, Any],
    credential: Credential | None = None,
) -> httpx.Request:
    """Build the POST /transfer request.

    Args:
        config: Base URL and timeout.
        payload: Output of ``build_transfer_payload``.
        credential: Bearer token to attach, if authenticated.

    Returns:
        httpx.Request ready to be sent.
    """
    headers = {"Content-Type": JSON_CONTENT_TYPE, **_auth_headers(credential)}
    return httpx.Request(
        "POST",
        config.url_for(TRANSFER_PATH),
        headers=headers,
        content=serialize_transfer_payload(payload).encode("utf-8"),
        extensions=_timeout_extensions(config),
    )


def build_account_validation_request(
    config: ClientConfig,
    account_id: str,
    credential: Credential | None = None,
) -> httpx.Request:
    """Build the GET /accounts/validate/{id} request.

    Args:
        config: Base URL and timeout.
        account_id: Identifier already checked by ``validate_account_format``.
        credential: Bearer token to attach, if authenticated.
    """
    headers = {"Accept": JSON_CONTENT_TYPE, **_auth_headers(credential)}
    return httpx.Request(
        "GET",
        config.url_for(ACCOUNT_VALIDATION_PATH.format(account_id=account_id)),
        headers=headers,
        extensions=_timeout_extensions(config),
    )


def build_auth_request(config: ClientConfig) -> httpx.Request:
    """Build the POST /authToken request with an empty JSON object body."""
    return httpx.Request(
        "POST",
        config.url_for(AUTH_TOKEN_PATH),
        headers={"Content-Type": JSON_CONTENT_TYPE},
        content=EMPTY_JSON_OBJECT.encode("utf-8"),
        extensions=_timeout_extensions(config),
    )
