"""Immutable banking value objects."""

from bankclient.domain.value_objects.client_config import ClientConfig
from bankclient.domain.value_objects.credential import Credential
from bankclient.domain.value_objects.transfer_request import TransferRequest
from bankclient.domain.value_objects.transfer_result import TransferResult

__all__ = [
    "ClientConfig",
    "Credential",
    "TransferRequest",
    "TransferResult",
]
