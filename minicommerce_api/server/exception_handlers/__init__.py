"""
Exception handlers for the Mini Commerce API server.

This package contains the handlers that turn exceptions into the uniform
``ApiError`` body and a setup function to register them with the FastAPI
application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
