"""
Exception handlers for the blog list server.

This package contains the exception handlers that turn errors into
``{"error": ...}`` JSON responses and a setup function to register them with
the FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
