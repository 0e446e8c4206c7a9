"""Application-level API assembly."""

from .dependencies import get_task_store
from .service_builder import ServiceBuilder, ServiceInfo

__all__ = ["ServiceBuilder", "ServiceInfo", "get_task_store"]
