"""Mini Commerce API.

A small shop backend exposing users, categories, products, orders and reviews
over a JSON REST API.

Subpackages
-----------

- ``minicommerce_api.core``:

  - Logging and monitoring configuration.
  - The database layer: SQLModel entities, async repositories, session and
    engine management.
  - I/O models (request and response schemas) shared by the API.

- ``minicommerce_api.server``:

  - The FastAPI application, its routers, middleware and exception handlers.
  - The service layer holding the business rules (stock handling, order
    status transitions, uniqueness checks).
"""

__version__ = "0.0.1"
