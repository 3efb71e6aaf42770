"""Configuration errors raised at client construction time.

Unlike DomainError, a bad configuration is a programming error: it is raised
immediately, before any network access, following the value-object
convention of raising ValueError from ``__post_init__``.
"""


class ClientConfigError(ValueError):
    """Raised when a client is constructed with unusable connection settings."""

    def __init__(self, field: str, reason: str) -> None:
        """Initialize configuration error.

        Args:
            field: Name of the offending setting.
            reason: Why the value was rejected.
        """
        super().__init__(f"Invalid client configuration for '{field}': {reason}")
        self.field = field
        self.reason = reason
