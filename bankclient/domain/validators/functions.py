"""Validation functions for transfer inputs.

Pure functions: no network access, no side effects. Each returns a Result so
the client can short-circuit before any request is constructed.

Rules:
    - Account identifier: ``ACC`` followed by exactly four ASCII digits
    - Amount: strictly positive and at most 1,000,000 (inclusive), still
      positive once rounded half-up to cents
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bankclient.core.constants import (
    ACCOUNT_ID_EXAMPLE,
    ACCOUNT_ID_PATTERN,
    AMOUNT_QUANTUM,
    MAX_TRANSFER_AMOUNT,
    MIN_TRANSFER_AMOUNT_EXCLUSIVE,
)
from bankclient.core.enums import ErrorCode
from bankclient.core.result import Failure, Result, Success
from bankclient.domain.errors import InvalidAmountError, InvalidFormatError

type AmountInput = Decimal | int | float | str


def is_valid_account_format(account_id: object) -> bool:
    """Check account identifier shape without contacting the server.

    Args:
        account_id: Candidate identifier.

    Returns:
        True if the value is a string of the form ``ACC####``.

    Example:
        >>> is_valid_account_format("ACC1000")
        True
        >>> is_valid_account_format("ACC12345")
        False
    """
    return isinstance(account_id, str) and ACCOUNT_ID_PATTERN.fullmatch(account_id) is not None


def validate_account_format(
    account_id: str | None,
    *,
    field: str = "account_id",
) -> Result[str, InvalidFormatError]:
    """Validate an account identifier.

    Args:
        account_id: Identifier to check. None and "" are rejected.
        field: Input name reported in the error (e.g., "from_account").

    Returns:
        Success(str): The identifier, unchanged.
        Failure(InvalidFormatError): If absent or not ``ACC####``.
    """
    if is_valid_account_format(account_id):
        return Success(value=account_id)  # type: ignore[arg-type]

    return Failure(
        error=InvalidFormatError(
            code=ErrorCode.INVALID_ACCOUNT_FORMAT,
            message=(
                f"Invalid account format: {account_id}. "
                f"Expected format: ACC#### (e.g., {ACCOUNT_ID_EXAMPLE})"
            ),
            field=field,
            account_id=account_id if isinstance(account_id, str) else None,
        )
    )


def _to_decimal(amount: AmountInput) -> Decimal | None:
    # bool is an int subclass but never a valid amount
    if isinstance(amount, bool):
        return None
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, int):
        return Decimal(amount)
    if isinstance(amount, float):
        return Decimal(str(amount))
    if isinstance(amount, str):
        try:
            return Decimal(amount.strip())
        except InvalidOperation:
            return None
    return None


def validate_amount(amount: AmountInput | None) -> Result[Decimal, InvalidAmountError]:
    """Validate a transfer amount.

    Args:
        amount: Amount as Decimal, int, float or numeric string.

    Returns:
        Success(Decimal): The amount rounded half-up to cents.
        Failure(InvalidAmountError): If not numeric, not finite, <= 0,
            greater than 1,000,000, or zero once rounded to cents.

    Example:
        >>> validate_amount(1_000_000)
        Success(value=Decimal('1000000.00'))
        >>> validate_amount(0)
        Failure(error=InvalidAmountError(...))
    """
    value = _to_decimal(amount) if amount is not None else None

    if value is None or not value.is_finite():
        return Failure(
            error=InvalidAmountError(
                code=ErrorCode.INVALID_AMOUNT,
                message=f"Amount is not a valid number: {amount!r}",
                amount=None if amount is None else str(amount),
            )
        )

    if value <= MIN_TRANSFER_AMOUNT_EXCLUSIVE:
        return Failure(
            error=InvalidAmountError(
                code=ErrorCode.INVALID_AMOUNT,
                message=f"Amount must be positive: {value}",
                amount=str(value),
            )
        )

    if value > MAX_TRANSFER_AMOUNT:
        return Failure(
            error=InvalidAmountError(
                code=ErrorCode.INVALID_AMOUNT,
                message=f"Amount exceeds maximum limit of {MAX_TRANSFER_AMOUNT}: {value}",
                amount=str(value),
            )
        )

    cents = value.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
    if cents <= MIN_TRANSFER_AMOUNT_EXCLUSIVE:
        return Failure(
            error=InvalidAmountError(
                code=ErrorCode.INVALID_AMOUNT,
                message=f"Amount must be positive after rounding to cents: {value}",
                amount=str(value),
            )
        )

    return Success(value=cents)
