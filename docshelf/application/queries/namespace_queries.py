"""Namespace queries (read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListNamespaces:
    """List every configured namespace in catalog order."""


@dataclass(frozen=True, kw_only=True)
class GetNamespace:
    """Get a single namespace by name (case-insensitive).

    Attributes:
        name: Namespace (project) name.
    """

    name: str
