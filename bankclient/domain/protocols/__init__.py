"""Domain protocols (ports)."""

from bankclient.domain.protocols.banking_client_protocol import BankingClientProtocol
from bankclient.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["BankingClientProtocol", "LoggerProtocol"]
