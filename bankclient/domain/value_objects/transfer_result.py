"""TransferResult value object.

Outcome of a transfer as reported by the server in a 200 response. Note
that a 200 response may still describe a failed transfer: check
``is_successful``.
"""

from dataclasses import dataclass
from decimal import Decimal

from bankclient.core.constants import SUCCESS_STATUS


@dataclass(frozen=True, slots=True, kw_only=True)
class TransferResult:
    """Transfer outcome reported by the banking server.

    Attributes:
        transaction_id: Server transaction identifier, "" when not returned.
        status: Server status string (e.g., "SUCCESS", "FAILED").
        message: Server message.
        from_account: Source account as echoed by the server.
        to_account: Destination account as echoed by the server.
        amount: Amount as echoed by the server.
    """

    transaction_id: str = ""
    status: str = ""
    message: str = ""
    from_account: str | None = None
    to_account: str | None = None
    amount: Decimal | None = None

    @property
    def is_successful(self) -> bool:
        """True iff status equals "SUCCESS", ignoring case."""
        return self.status.upper() == SUCCESS_STATUS

    def __str__(self) -> str:
        amount = f"{self.amount:.2f}" if self.amount is not None else "-"
        return (
            f"TransferResult(transaction_id={self.transaction_id!r}, "
            f"status={self.status!r}, message={self.message!r}, "
            f"from_account={self.from_account!r}, to_account={self.to_account!r}, "
            f"amount={amount})"
        )
