"""
Stay With Friends Server Package.

This package contains the web server implementation for Stay With Friends.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    services: Business rules, one service per resource.
    exception_handlers: Mapping of domain errors onto HTTP responses.
    middleware: Request logging and timing.
"""
