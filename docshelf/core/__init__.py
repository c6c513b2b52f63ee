"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Settings and the dependency container

The core module has NO dependencies on the domain or presentation layers
(the container is the one place that wires them together).
"""

from docshelf.core.enums import ErrorCode
from docshelf.core.errors import DomainError, NotFoundError
from docshelf.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
]
