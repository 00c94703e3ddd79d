"""Interfaces of the core.

Contracts (Protocol) implemented by the adapters, so the core depends on
abstractions only.
"""

from pinterest_api.core.interfaces.transport import Authentication

__all__ = ["Authentication"]
