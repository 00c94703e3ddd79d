"""Domain model of the API.

Pure data structures (Pydantic v2 models, dataclasses, enums): the domain
knows nothing about HTTP, the CLI or configuration.
"""

from pinterest_api.core.domain.image import Image, ImageSource
from pinterest_api.core.domain.models import ApiObject, Board, ObjectKind, PagedList, Pin, User

__all__ = [
    "ApiObject",
    "Board",
    "Image",
    "ImageSource",
    "ObjectKind",
    "PagedList",
    "Pin",
    "User",
]
