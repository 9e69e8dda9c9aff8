"""Static values shared by the API layer."""

PROJECT_NAME = "Mini Commerce API"
API_PREFIX = "/api"
API_VERSION = "0.0.1"
SCHEMA_VERSION = "v1"
