"""ClientConfig value object.

Connection parameters fixed for the lifetime of a client instance.
"""

from dataclasses import dataclass

from bankclient.core.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from bankclient.core.errors import ClientConfigError
from bankclient.core.validation import normalize_base_url


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Validated connection settings.

    Attributes:
        base_url: Banking server base URL without trailing slash.
        timeout: Connect and per-request timeout in seconds.

    Raises:
        ClientConfigError: If base_url is None, blank or not an http(s) URL with
            a host, or timeout is not positive.

    Example:
        >>> ClientConfig("http://bank.local:8123/").base_url
        'http://bank.local:8123'
        >>> ClientConfig("")
        Traceback (most recent call last):
        ...
        ClientConfigError: Invalid client configuration for 'base_url': must not be empty
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate and normalize fields.

        Raises:
            ClientConfigError: On unusable values.
        """
        if self.base_url is None:
            raise ClientConfigError("base_url", "must not be None")
        if not isinstance(self.base_url, str):
            raise ClientConfigError("base_url", "must be a string")
        try:
            base_url = normalize_base_url(self.base_url)
        except ValueError as e:
            raise ClientConfigError("base_url", str(e)) from e
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ClientConfigError("timeout", "must be a number of seconds")
        if self.timeout <= 0:
            raise ClientConfigError("timeout", "must be greater than 0")

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "base_url", base_url)
        object.__setattr__(self, "timeout", float(self.timeout))

    def url_for(self, path: str) -> str:
        """Join a path onto the base URL.

        Args:
            path: Absolute path starting with "/".
        """
        return f"{self.base_url}{path}"
