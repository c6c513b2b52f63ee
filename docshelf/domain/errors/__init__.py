"""Domain errors package.

Usage:
    from docshelf.domain.errors import DocumentError
"""

from docshelf.domain.errors.document_error import DocumentError

__all__ = ["DocumentError"]
