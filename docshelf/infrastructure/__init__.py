"""Infrastructure layer - Adapters for the domain protocols.

- archives/: zip/jar backed documentation archives on local disk
- catalog/: YAML catalog loader
- logging/: structlog console adapter
"""
