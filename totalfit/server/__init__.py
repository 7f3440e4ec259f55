"""
TotalFit Server Package.

This package contains the web server implementation for TotalFit.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    exception_handlers: Mapping of domain errors to JSON responses.
    middleware: Request logging middleware.
    services: FastAPI dependency providers.
"""
