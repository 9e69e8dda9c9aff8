"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from minicommerce_api.core.database import close_db, init_db
from minicommerce_api.core.logging_config import get_logger, setup_logging
from minicommerce_api.core.monitoring import initialize_logfire

from .api.v1 import categories, health, orders, products, reviews, users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup and releases the connection pool on
    shutdown.
    """
    logger.info("Starting up Mini Commerce API...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Mini Commerce API...")
    await close_db()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Mini Commerce API

    A small e-commerce backend: users, categories, products, orders with stock
    reservation and a CREATED -> PAID | CANCELLED status flow, and product reviews.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(users.router, prefix=f"{constant.API_PREFIX}/users")
app.include_router(categories.router, prefix=f"{constant.API_PREFIX}/categories")
app.include_router(products.router, prefix=f"{constant.API_PREFIX}/products")
app.include_router(orders.router, prefix=f"{constant.API_PREFIX}/orders")
app.include_router(reviews.router, prefix=f"{constant.API_PREFIX}/reviews")

initialize_logfire(app)


def run_server() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "minicommerce_api.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run_server()
