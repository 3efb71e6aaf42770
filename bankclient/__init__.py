"""Async client for the banking service's transfer and account APIs.

Usage:
    from bankclient import BankingClient, Failure, Success

    async with BankingClient("http://localhost:8123") as client:
        result = await client.transfer_funds("ACC1000", "ACC1001", 100)
"""

from bankclient.core.config import BankingSettings, get_settings
from bankclient.core.errors import ClientConfigError
from bankclient.core.result import Failure, Result, Success
from bankclient.domain.errors import (
    AuthenticationFailed,
    BankingError,
    InvalidAmountError,
    InvalidFormatError,
    MalformedResponse,
    TransferRejected,
    TransportFailure,
)
from bankclient.domain.validators import (
    is_valid_account_format,
    validate_account_format,
    validate_amount,
)
from bankclient.domain.value_objects import (
    ClientConfig,
    Credential,
    TransferRequest,
    TransferResult,
)
from bankclient.infrastructure.banking import BankingClient, TransferOrder

__all__ = [
    "BankingClient",
    "TransferOrder",
    "BankingSettings",
    "get_settings",
    "ClientConfig",
    "ClientConfigError",
    "Credential",
    "TransferRequest",
    "TransferResult",
    "Result",
    "Success",
    "Failure",
    "BankingError",
    "InvalidFormatError",
    "InvalidAmountError",
    "TransferRejected",
    "AuthenticationFailed",
    "MalformedResponse",
    "TransportFailure",
    "is_valid_account_format",
    "validate_account_format",
    "validate_amount",
]
