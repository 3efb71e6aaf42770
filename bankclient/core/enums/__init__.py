"""Core enums package.

Usage:
    from bankclient.core.enums import ErrorCode, Environment
"""

from bankclient.core.enums.environment import Environment
from bankclient.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
