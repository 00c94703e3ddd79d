"""Adapters: concrete I/O (httpx transport, file export)."""

from pinterest_api.adapters.authentication import HttpxAuthentication
from pinterest_api.adapters.http_client import build_async_client
from pinterest_api.adapters.json_exporter import export_objects_json

__all__ = [
    "HttpxAuthentication",
    "build_async_client",
    "export_objects_json",
]
