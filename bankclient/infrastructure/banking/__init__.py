"""Banking API adapter: request building, response interpretation, client."""

from bankclient.infrastructure.banking.banking_client import BankingClient
from bankclient.infrastructure.banking.transfer_order import TransferOrder

__all__ = ["BankingClient", "TransferOrder"]
