"""
Mini Commerce API Server Package.

This package contains the web server implementation of the shop backend.
It includes the API definition, service layer, error handling and configuration.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration settings and constants.
    exception_handlers: Translation of domain errors into HTTP error bodies.
    middleware: Request logging and timing.
    services: Business logic for users, categories, products, orders and reviews.
"""
