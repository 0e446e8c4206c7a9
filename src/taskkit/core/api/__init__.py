"""FastAPI framework layer - routers, middleware, utilities."""

from .dependencies import get_database
from .middleware import add_error_handlers, add_logging_middleware, store_error_handler, validation_error_handler
from .router import Router
from .routers import HealthRouter, HealthState, HealthStatus
from .service_builder import API_PREFIX, BaseServiceBuilder, ServiceInfo
from .utilities import run_app

__all__ = [
    # Base router classes
    "Router",
    # Service builder
    "API_PREFIX",
    "BaseServiceBuilder",
    "ServiceInfo",
    # Dependencies
    "get_database",
    # Middleware
    "add_error_handlers",
    "add_logging_middleware",
    "store_error_handler",
    "validation_error_handler",
    # System routers
    "HealthRouter",
    "HealthState",
    "HealthStatus",
    # Utilities
    "run_app",
]
