"""Application layer - Use cases and orchestration.

Structure:
- queries/: Query dataclasses and their handlers (read-only; this service
  never changes state)
- services/: VersionResolver (version group and latest-version lookup)

The application layer orchestrates domain logic and knows nothing about HTTP.
"""
