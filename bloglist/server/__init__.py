"""
Blog List Server Package.

This package contains the web server implementation for the blog list service.
It includes the API definition, configuration, authentication helpers and
exception handling.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration, constants, and password/token helpers.
    services: FastAPI dependencies shared by the routers.
    exception_handlers: Mapping of exceptions to JSON error responses.
    middleware: Request logging middleware.
"""
