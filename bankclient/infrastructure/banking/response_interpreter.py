"""Response interpretation for the banking API.

Maps an ``httpx.Response`` (or the exception raised instead of one) to a
Result. Only status 200 counts as success; every other status is a typed
failure carrying the status and body.

Status handling:
    /transfer       200 -> TransferResult, else TransferRejected(status, body)
    /accounts/...   200 -> True, else False
    /authToken      200 -> Credential, else AuthenticationFailed(status)
    (no response)   TransportFailure(status_code=None)
"""

import httpx
from pydantic import ValidationError

from bankclient.core.enums import ErrorCode
from bankclient.core.result import Failure, Result, Success
from bankclient.domain.errors import (
    AuthenticationFailed,
    BankingError,
    MalformedResponse,
    TransferRejected,
    TransportFailure,
)
from bankclient.domain.value_objects import Credential, TransferResult
from bankclient.schemas import TokenResponseSchema, TransferResponseSchema

HTTP_OK = 200


def _malformed(response: httpx.Response, error: ValidationError, what: str) -> Failure[BankingError]:
    return Failure(
        error=MalformedResponse(
            code=ErrorCode.MALFORMED_RESPONSE,
            message=f"Failed to parse {what} response",
            status_code=response.status_code,
            parse_error=str(error),
            response_body=response.text,
        )
    )


def interpret_transfer_response(
    response: httpx.Response,
) -> Result[TransferResult, BankingError]:
    """Interpret a /transfer response.

    Args:
        response: Response to POST /transfer.

    Returns:
        Success(TransferResult): Status 200 with a decodable body.
        Failure(MalformedResponse): Status 200 with an undecodable body.
        Failure(TransferRejected): Any other status; carries the exact body.
    """
    if response.status_code != HTTP_OK:
        body = response.text
        return Failure(
            error=TransferRejected(
                code=ErrorCode.TRANSFER_REJECTED,
                message=f"Transfer failed with status {response.status_code}: {body}",
                status_code=response.status_code,
                response_body=body,
            )
        )

    try:
        schema = TransferResponseSchema.model_validate_json(response.content)
    except ValidationError as e:
        return _malformed(response, e, "transfer")

    return Success(value=schema.to_domain())


def interpret_validation_response(response: httpx.Response) -> bool:
    """Interpret an /accounts/validate/{id} response: valid iff status 200."""
    return response.status_code == HTTP_OK


def interpret_auth_response(
    response: httpx.Response,
) -> Result[Credential, BankingError]:
    """Interpret an /authToken response.

    Args:
        response: Response to POST /authToken.

    Returns:
        Success(Credential): Status 200 with ``token`` and ``expiresIn``.
        Failure(MalformedResponse): Status 200 without a usable token.
        Failure(AuthenticationFailed): Any other status.
    """
    if response.status_code != HTTP_OK:
        return Failure(
            error=AuthenticationFailed(
                code=ErrorCode.AUTHENTICATION_FAILED,
                message=f"Authentication failed with status {response.status_code}",
                status_code=response.status_code,
                response_body=response.text,
            )
        )

    try:
        schema = TokenResponseSchema.model_validate_json(response.content)
    except ValidationError as e:
        return _malformed(response, e, "authentication")

    return Success(value=schema.to_domain())


def interpret_transport_error(error: httpx.HTTPError, operation: str) -> TransportFailure:
    """Convert a transport exception into a TransportFailure.

    Args:
        error: Exception raised by httpx instead of returning a response.
        operation: Operation name for the message (e.g., "transfer").

    Returns:
        TransportFailure with no status code.
    """
    is_timeout = isinstance(error, httpx.TimeoutException)
    reason = "timed out" if is_timeout else "failed"
    return TransportFailure(
        code=ErrorCode.TRANSPORT_FAILURE,
        message=f"{operation.capitalize()} request {reason}: {error}",
        status_code=None,
        cause_type=type(error).__name__,
        cause_message=str(error),
        is_timeout=is_timeout,
    )
