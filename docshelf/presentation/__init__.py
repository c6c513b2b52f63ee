"""Presentation layer - FastAPI routers, middleware and error handlers."""
