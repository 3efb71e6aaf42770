"""Banking client error types.

These errors are the failure half of every client operation's Result. Each
kind is its own class so callers can branch with ``match`` or
``isinstance`` instead of inspecting message strings.

Architecture:
- Inherit from DomainError (core layer)
- Returned inside Failure, never raised
- ``status_code`` is None when no HTTP status exists (validation errors and
  transport failures); it is never 0

Usage:
    from bankclient.domain.errors import TransferRejected, TransportFailure

    match await client.transfer_funds("ACC1000", "ACC1001", 100):
        case Failure(error=TransferRejected(status_code=status)):
            ...
        case Failure(error=TransportFailure()):
            ...  # server unreachable, check it is running
"""

from dataclasses import dataclass

from bankclient.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class BankingError(DomainError):
    """Base banking client error.

    Attributes:
        code: ErrorCode for the failure kind.
        message: Human-readable message.
        status_code: HTTP status from the server, None when there was none.
        details: Additional context.
    """

    status_code: int | None = None

    @property
    def has_status(self) -> bool:
        """Whether the server produced an HTTP status for this failure."""
        return self.status_code is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidFormatError(BankingError):
    """Account identifier is not ``ACC`` followed by four digits.

    Returned before any request is built.

    Attributes:
        field: Which input was rejected (e.g., "from_account").
        account_id: The rejected value as given, None when absent.
    """

    field: str = "account_id"
    account_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidAmountError(BankingError):
    """Transfer amount is not in the range (0, 1,000,000].

    Attributes:
        amount: String form of the rejected amount.
    """

    amount: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TransferRejected(BankingError):
    """The server answered /transfer with a non-200 status.

    Attributes:
        status_code: The HTTP status returned.
        response_body: The exact, untruncated response body.
    """

    response_body: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationFailed(BankingError):
    """The server answered /authToken with a non-200 status.

    Attributes:
        status_code: The HTTP status returned.
        response_body: Raw response body.
    """

    response_body: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class MalformedResponse(BankingError):
    """A 200 response body could not be decoded into the expected shape.

    Attributes:
        parse_error: Description of the decoding failure.
        response_body: Raw response body.
    """

    parse_error: str
    response_body: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class TransportFailure(BankingError):
    """No response was obtained (I/O error, timeout, connection refused).

    ``status_code`` is always None.

    Attributes:
        cause_type: Class name of the underlying exception.
        cause_message: Message of the underlying exception.
        is_timeout: Whether the cause was a timeout.
    """

    cause_type: str
    cause_message: str = ""
    is_timeout: bool = False
