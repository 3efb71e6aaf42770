"""Wire schemas for banking API responses."""

from bankclient.schemas.banking_schemas import (
    TokenResponseSchema,
    TransferResponseSchema,
)

__all__ = ["TokenResponseSchema", "TransferResponseSchema"]
