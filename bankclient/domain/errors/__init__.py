"""Domain errors package.

Usage:
    from bankclient.domain.errors import BankingError, TransferRejected
"""

from bankclient.domain.errors.banking_error import (
    AuthenticationFailed,
    BankingError,
    InvalidAmountError,
    InvalidFormatError,
    MalformedResponse,
    TransferRejected,
    TransportFailure,
)

__all__ = [
    "BankingError",
    # Validation
    "InvalidFormatError",
    "InvalidAmountError",
    # Server-reported
    "TransferRejected",
    "AuthenticationFailed",
    # Protocol / transport
    "MalformedResponse",
    "TransportFailure",
]
