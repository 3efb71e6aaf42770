"""Unit tests for banking error types.

Tests cover:
- Hierarchy (every kind is a BankingError and a DomainError)
- Status code presence per kind
- String form and immutability
- Pattern matching on Result failures
- ClientConfigError as a ValueError
"""

from dataclasses import FrozenInstanceError

import pytest

from bankclient.core.enums import ErrorCode
from bankclient.core.errors import ClientConfigError, DomainError
from bankclient.core.result import Failure, Success
from bankclient.domain.errors import (
    AuthenticationFailed,
    BankingError,
    InvalidAmountError,
    InvalidFormatError,
    MalformedResponse,
    TransferRejected,
    TransportFailure,
)


def _all_errors() -> list[BankingError]:
    return [
        InvalidFormatError(code=ErrorCode.INVALID_ACCOUNT_FORMAT, message="bad id"),
        InvalidAmountError(code=ErrorCode.INVALID_AMOUNT, message="bad amount"),
        TransferRejected(code=ErrorCode.TRANSFER_REJECTED, message="no", status_code=400),
        AuthenticationFailed(
            code=ErrorCode.AUTHENTICATION_FAILED, message="no", status_code=401
        ),
        MalformedResponse(
            code=ErrorCode.MALFORMED_RESPONSE, message="bad", status_code=200, parse_error="x"
        ),
        TransportFailure(code=ErrorCode.TRANSPORT_FAILURE, message="down", cause_type="ConnectError"),
    ]


@pytest.mark.unit
class TestBankingErrorHierarchy:
    """Test error hierarchy and common fields."""

    @pytest.mark.parametrize("error", _all_errors(), ids=lambda e: type(e).__name__)
    def test_is_domain_error(self, error: BankingError):
        assert isinstance(error, BankingError)
        assert isinstance(error, DomainError)
        assert not isinstance(error, Exception)

    def test_local_failures_have_no_status(self):
        local = [e for e in _all_errors() if isinstance(e, (InvalidFormatError, InvalidAmountError, TransportFailure))]

        assert all(e.status_code is None and not e.has_status for e in local)

    def test_str_includes_code_and_message(self):
        error = TransferRejected(
            code=ErrorCode.TRANSFER_REJECTED, message="Transfer failed", status_code=500
        )

        assert str(error) == "transfer_rejected: Transfer failed"

    def test_errors_are_immutable(self):
        error = TransferRejected(code=ErrorCode.TRANSFER_REJECTED, message="no")

        with pytest.raises(FrozenInstanceError):
            error.status_code = 200  # type: ignore[misc]


@pytest.mark.unit
class TestErrorMatching:
    """Test branching on failures with match."""

    @staticmethod
    def _describe(result) -> str:
        match result:
            case Success():
                return "ok"
            case Failure(error=TransferRejected(status_code=status)):
                return f"rejected {status}"
            case Failure(error=TransportFailure(is_timeout=True)):
                return "timeout"
            case Failure(error=error):
                return error.code.name

    def test_match_by_kind(self):
        assert self._describe(Success(value=None)) == "ok"
        assert (
            self._describe(
                Failure(
                    error=TransferRejected(
                        code=ErrorCode.TRANSFER_REJECTED, message="", status_code=409
                    )
                )
            )
            == "rejected 409"
        )
        assert (
            self._describe(
                Failure(
                    error=TransportFailure(
                        code=ErrorCode.TRANSPORT_FAILURE,
                        message="",
                        cause_type="ReadTimeout",
                        is_timeout=True,
                    )
                )
            )
            == "timeout"
        )
        assert (
            self._describe(
                Failure(error=InvalidAmountError(code=ErrorCode.INVALID_AMOUNT, message=""))
            )
            == "INVALID_AMOUNT"
        )


@pytest.mark.unit
class TestClientConfigError:
    """Test ClientConfigError."""

    def test_is_value_error_with_field_and_reason(self):
        error = ClientConfigError("timeout", "must be greater than 0")

        assert isinstance(error, ValueError)
        assert error.field == "timeout"
        assert error.reason == "must be greater than 0"
        assert str(error) == "Invalid client configuration for 'timeout': must be greater than 0"
