"""Services of the core: orchestration of requests, mapping and pagination."""

from pinterest_api.core.services.api import Api

__all__ = ["Api"]
