"""BankingClientProtocol: the capability set of a banking API client.

Port (interface) for the three operations the remote banking service
supports. ``BankingClient`` implements it; tests and callers can substitute
any structurally compatible object (e.g., an in-memory fake).

This is a Protocol (not ABC) for structural typing. Implementations don't
need to inherit from it.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bankclient.core.result import Result
    from bankclient.domain.errors import BankingError
    from bankclient.domain.value_objects import Credential, TransferResult


class BankingClientProtocol(Protocol):
    """Protocol (port) for banking API clients.

    All fallible operations return Result types:
    - Success(value) when the server accepted the call
    - Failure(BankingError) otherwise
    """

    async def authenticate(self) -> "Result[Credential, BankingError]":
        """Obtain a bearer token and attach it to subsequent requests.

        Returns:
            Success(Credential): Token stored on the client.
            Failure(AuthenticationFailed): Non-200 from the server.
            Failure(MalformedResponse): 200 with an undecodable body.
            Failure(TransportFailure): Server unreachable.
        """
        ...

    async def transfer_funds(
        self,
        from_account: str | None,
        to_account: str | None,
        amount: Decimal | int | float | str | None,
    ) -> "Result[TransferResult, BankingError]":
        """Transfer funds between two accounts.

        Returns:
            Success(TransferResult): Server processed the request (check
                ``is_successful`` for the business outcome).
            Failure(InvalidFormatError | InvalidAmountError): Rejected locally.
            Failure(TransferRejected): Non-200 from the server.
            Failure(MalformedResponse): 200 with an undecodable body.
            Failure(TransportFailure): Server unreachable.
        """
        ...

    async def validate_account(self, account_id: str | None) -> bool:
        """Ask the server whether an account exists.

        Returns:
            True only for a well-formed id the server answers 200 for.
        """
        ...

    async def close(self) -> None:
        """Release held connection resources. Safe to call repeatedly."""
        ...
