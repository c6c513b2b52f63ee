"""Documentation queries (read operations).

Queries are immutable data containers; handlers do the work.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ResolveDocument:
    """Resolve a request for a file in a project's documentation tree.

    Attributes:
        project: Project name from the URL.
        version: Version string from the URL, exactly as requested.
        path: Remainder after ``/{project}/{version}/``; empty for the tree
            root, None when the URL had no trailing slash at all.
        request_path: Full request path, used to build redirect locations.
        query_string: Raw query string, carried over on redirects.

    Example:
        >>> query = ResolveDocument(
        ...     project="paper",
        ...     version="1.20",
        ...     path="index.html",
        ...     request_path="/paper/1.20/index.html",
        ... )
        >>> result = await handler.handle(query)
    """

    project: str
    version: str
    path: str | None
    request_path: str
    query_string: str = ""
