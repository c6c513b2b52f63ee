"""Core enums package.

Usage:
    from docshelf.core.enums import ErrorCode, Environment
"""

from docshelf.core.enums.environment import Environment
from docshelf.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
