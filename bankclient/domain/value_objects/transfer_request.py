"""TransferRequest value object.

A transfer whose inputs have already passed validation. Instances are only
obtained through ``TransferRequest.create``, which returns a Result, so a
TransferRequest in hand is always well-formed.

Note:
    Source and destination may be the same account; no rule forbids it.
"""

from dataclasses import dataclass
from decimal import Decimal

from bankclient.core.result import Failure, Result, Success
from bankclient.domain.errors import BankingError
from bankclient.domain.validators import (
    AmountInput,
    validate_account_format,
    validate_amount,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class TransferRequest:
    """Validated request to move funds between two accounts.

    Attributes:
        from_account: Source account identifier (``ACC####``).
        to_account: Destination account identifier (``ACC####``).
        amount: Amount in the range (0, 1,000,000].
    """

    from_account: str
    to_account: str
    amount: Decimal

    @classmethod
    def create(
        cls,
        from_account: str | None,
        to_account: str | None,
        amount: AmountInput | None,
    ) -> Result["TransferRequest", BankingError]:
        """Validate inputs and build a TransferRequest.

        Checks run in order source, destination, amount; the first failure
        is returned.

        Returns:
            Success(TransferRequest): All inputs valid.
            Failure(InvalidFormatError): An account identifier is malformed.
            Failure(InvalidAmountError): Amount out of bounds.
        """
        from_result = validate_account_format(from_account, field="from_account")
        if isinstance(from_result, Failure):
            return from_result

        to_result = validate_account_format(to_account, field="to_account")
        if isinstance(to_result, Failure):
            return to_result

        amount_result = validate_amount(amount)
        if isinstance(amount_result, Failure):
            return amount_result

        return Success(
            value=cls(
                from_account=from_result.value,
                to_account=to_result.value,
                amount=amount_result.value,
            )
        )
