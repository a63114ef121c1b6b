"""
Core utilities and configuration for the blog list service.

This package provides core functionality including logging configuration,
database setup, shared schemas and blog aggregation helpers.
"""

from bloglist.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
