"""Result types for railway-oriented programming.

Operations that can fail in an expected way (an unknown namespace, a file
missing from an archive) return a Result instead of raising. Callers
pattern-match on the outcome.

Usage:
    def find_page(path: str) -> Result[bytes, str]:
        if path not in pages:
            return Failure(error="Page not found")
        return Success(value=pages[path])

    match find_page("index.html"):
        case Success(value=body):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
