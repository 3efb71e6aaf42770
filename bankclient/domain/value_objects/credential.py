"""Credential value object.

Bearer token obtained from the /authToken endpoint. Held in memory by one
client instance only.

Expiry is advisory: ``is_expired`` reports it, but the client keeps
attaching the token until it is replaced by another ``authenticate()`` call
or the client is discarded.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta


@dataclass(frozen=True, slots=True, kw_only=True)
class Credential:
    """Bearer token with advisory lifetime.

    Attributes:
        token: Opaque bearer token.
        expires_in: Lifetime in seconds as reported by the server.
        issued_at: When the token was received (UTC).
    """

    token: str
    expires_in: int
    issued_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def expires_at(self) -> datetime:
        """Time the server says the token stops being valid."""
        return self.issued_at + timedelta(seconds=self.expires_in)

    def is_expired(self, *, now: datetime | None = None) -> bool:
        """Whether the advisory lifetime has elapsed.

        Args:
            now: Reference time (defaults to the current UTC time).
        """
        return (now or datetime.now(UTC)) >= self.expires_at

    def __repr__(self) -> str:
        # token is never rendered
        return f"Credential(expires_in={self.expires_in}, issued_at={self.issued_at.isoformat()})"
