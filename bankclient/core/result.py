"""Result types for railway-oriented programming.

Every client operation that can fail for a business reason (bad input,
rejected transfer, unreachable server) returns a Result instead of raising.
Callers branch on the variant rather than on exception types or message
strings.

Usage:
    result = await client.transfer_funds("ACC1000", "ACC1001", Decimal("25"))
    match result:
        case Success(value=transfer):
            print(transfer.transaction_id)
        case Failure(error=TransferRejected() as error):
            print(error.status_code, error.response_body)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying a value.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying a typed error.

    Attributes:
        error: The error describing why the operation failed.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
