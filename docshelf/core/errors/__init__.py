"""Core errors package.

Usage:
    from docshelf.core.errors import DomainError, NotFoundError
"""

from docshelf.core.errors.common_errors import NotFoundError
from docshelf.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "NotFoundError",
]
