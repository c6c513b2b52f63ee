"""API tests package.

End-to-end tests for HTTP endpoints using TestClient.
Tests the complete request/response cycle including:
- Redirects and their Location headers
- Streamed documentation files and their headers
- JSON envelopes and problem details

Note:
    Handlers are swapped in through ``app.dependency_overrides`` so tests
    run against archives and catalogs built per test.
"""
