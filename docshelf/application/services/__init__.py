"""Application services."""

from docshelf.application.services.document_metadata import (
    CachePolicy,
    cache_policy_for,
    media_type_for,
)
from docshelf.application.services.version_resolver import VersionResolver

__all__ = ["CachePolicy", "VersionResolver", "cache_policy_for", "media_type_for"]
