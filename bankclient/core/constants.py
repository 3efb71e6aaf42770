"""Fixed constants of the banking API contract.

These are properties of the remote service and of the wire format, NOT
environment-specific configuration. For per-deployment settings use
``bankclient.core.config`` instead.

Example:
    >>> from bankclient.core.constants import BEARER_PREFIX
    >>> header = f"{BEARER_PREFIX}{credential.token}"
"""

import re
from decimal import Decimal

# =============================================================================
# Connection Defaults
# =============================================================================

DEFAULT_BASE_URL: str = "http://localhost:8123"
"""Banking server used when no base URL is configured."""

DEFAULT_TIMEOUT_SECONDS: float = 30.0
"""Connect and per-request timeout in seconds."""


# =============================================================================
# Validation Rules
# =============================================================================

ACCOUNT_ID_PATTERN: re.Pattern[str] = re.compile(r"ACC[0-9]{4}")
"""Account identifiers are ``ACC`` followed by exactly four ASCII digits."""

ACCOUNT_ID_EXAMPLE: str = "ACC1000"

MIN_TRANSFER_AMOUNT_EXCLUSIVE: Decimal = Decimal("0")
"""Transfers must be strictly greater than this amount."""

MAX_TRANSFER_AMOUNT: Decimal = Decimal("1000000")
"""Largest amount accepted for a single transfer (inclusive)."""

AMOUNT_QUANTUM: Decimal = Decimal("0.01")
"""Wire precision for transfer amounts (two fractional digits)."""


# =============================================================================
# Endpoints
# =============================================================================

TRANSFER_PATH: str = "/transfer"
ACCOUNT_VALIDATION_PATH: str = "/accounts/validate/{account_id}"
AUTH_TOKEN_PATH: str = "/authToken"


# =============================================================================
# Headers
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""

JSON_CONTENT_TYPE: str = "application/json"

SUCCESS_STATUS: str = "SUCCESS"
"""Transfer status reported by the server for a completed transfer."""
