"""Runtime environments.

Selects how the banking client renders its structured logs:
- DEVELOPMENT: colored, human-readable console output
- TESTING / CI: JSON lines for machine parsing
- PRODUCTION: JSON lines
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        """Whether logs should be rendered as JSON in this environment."""
        return self is not Environment.DEVELOPMENT
