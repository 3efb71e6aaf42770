"""Shared validation helpers for connection settings.

Used by both ``BankingSettings`` (environment) and ``ClientConfig``
(constructor arguments) so a base URL is accepted or rejected the same way
regardless of where it came from.

Usage:
    from bankclient.core.validation import normalize_base_url

    normalize_base_url(" http://localhost:8123/ ")  # "http://localhost:8123"
"""

import httpx

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})


def normalize_base_url(value: str) -> str:
    """Check that a base URL is usable and strip surrounding noise.

    Args:
        value: Candidate base URL.

    Returns:
        The URL without surrounding whitespace or trailing slashes.

    Raises:
        ValueError: If the URL is empty, cannot be parsed, is not http(s), or
            has no host.
    """
    url = value.strip().rstrip("/")
    if not url:
        raise ValueError("must not be empty")

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ValueError(f"is not a valid URL: {e}") from e

    if parsed.scheme not in ALLOWED_URL_SCHEMES:
        raise ValueError(f"must use http or https, got {parsed.scheme or 'no scheme'!r}")
    if not parsed.host:
        raise ValueError("must include a host")

    return url
