"""Test suite for Docshelf.

Test structure:
- unit/: Unit tests - domain, application, infrastructure and presentation
  pieces in isolation (archives are built in tmp_path)
- api/: API endpoint tests - HTTP behavior through TestClient
"""
