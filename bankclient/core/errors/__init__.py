"""Core errors package.

Usage:
    from bankclient.core.errors import DomainError, ClientConfigError
"""

from bankclient.core.errors.config_error import ClientConfigError
from bankclient.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ClientConfigError",
]
