"""Machine-readable error codes for banking client failures.

Codes follow the ENTITY_REASON naming convention and pair one-to-one with
the error classes in ``bankclient.domain.errors``.

Categories:
- Validation errors (raised locally, before any request is built)
- Server-reported errors (non-200 responses)
- Protocol errors (response body could not be decoded)
- Transport errors (no response obtained at all)
"""

from enum import Enum


class ErrorCode(Enum):
    """Banking client error codes."""

    # Validation errors
    INVALID_ACCOUNT_FORMAT = "invalid_account_format"
    INVALID_AMOUNT = "invalid_amount"

    # Server-reported errors
    TRANSFER_REJECTED = "transfer_rejected"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Protocol errors
    MALFORMED_RESPONSE = "malformed_response"

    # Transport errors
    TRANSPORT_FAILURE = "transport_failure"
