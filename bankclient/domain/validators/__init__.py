"""Input validators for account identifiers and transfer amounts."""

from bankclient.domain.validators.functions import (
    AmountInput,
    is_valid_account_format,
    validate_account_format,
    validate_amount,
)

__all__ = [
    "AmountInput",
    "is_valid_account_format",
    "validate_account_format",
    "validate_amount",
]
