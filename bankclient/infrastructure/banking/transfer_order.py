"""Fluent transfer orders.

An immutable description of a transfer with two entry points. Each setter
returns a new order, so a partially filled order can be reused:

    base = client.transfer().from_("ACC1000")
    await base.to("ACC1001").amount(50).execute()
    await base.to("ACC1002").amount(75).execute_with_validation()

``from_`` carries a trailing underscore because ``from`` is a keyword.
"""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Self

from bankclient.core.enums import ErrorCode
from bankclient.core.result import Failure, Result
from bankclient.domain.errors import BankingError, InvalidFormatError
from bankclient.domain.protocols import BankingClientProtocol
from bankclient.domain.validators import AmountInput

if TYPE_CHECKING:
    from bankclient.domain.value_objects import TransferResult


@dataclass(frozen=True, slots=True, kw_only=True)
class TransferOrder:
    """Transfer parameters bound to the client that will execute them.

    Attributes:
        client: Client used by ``execute`` and ``execute_with_validation``.
        source: Source account, None until ``from_`` is called.
        destination: Destination account, None until ``to`` is called.
        value: Amount, None until ``amount`` is called.
    """

    client: BankingClientProtocol
    source: str | None = None
    destination: str | None = None
    value: AmountInput | None = None

    def from_(self, account_id: str) -> Self:
        """Return a copy with the source account set."""
        return replace(self, source=account_id)

    def to(self, account_id: str) -> Self:
        """Return a copy with the destination account set."""
        return replace(self, destination=account_id)

    def amount(self, amount: AmountInput) -> Self:
        """Return a copy with the amount set."""
        return replace(self, value=amount)

    async def execute(self) -> "Result[TransferResult, BankingError]":
        """Run the transfer. Missing fields fail validation like bad ones."""
        return await self.client.transfer_funds(self.source, self.destination, self.value)

    async def execute_with_validation(self) -> "Result[TransferResult, BankingError]":
        """Confirm both accounts with the server, then run the transfer.

        Returns:
            Failure(InvalidFormatError): The source or destination account is
                not confirmed by ``validate_account``; no transfer is sent.
            Otherwise the result of ``execute``.
        """
        checks = (
            ("from_account", "Source", self.source),
            ("to_account", "Destination", self.destination),
        )
        for field, label, account_id in checks:
            if not await self.client.validate_account(account_id):
                return Failure(
                    error=InvalidFormatError(
                        code=ErrorCode.INVALID_ACCOUNT_FORMAT,
                        message=f"{label} account is invalid: {account_id}",
                        field=field,
                        account_id=account_id,
                    )
                )

        return await self.execute()
