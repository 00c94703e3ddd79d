"""Image payload source for pin creation.

An image is sent in exactly one of three ways, each with its own
parameter key:

- remote URL reference  -> `image_url`
- inline base64 payload -> `image_base64`
- raw file upload       -> `image` (multipart)
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pinterest_api.core.errors import InvalidArgument


class ImageSource(str, Enum):
    URL = "url"
    BASE64 = "base64"
    FILE = "file"


_PARAM_KEYS: dict[ImageSource, str] = {
    ImageSource.URL: "image_url",
    ImageSource.BASE64: "image_base64",
    ImageSource.FILE: "image",
}


class Image:
    """Image payload; build it with `Image.url`, `Image.base64` or `Image.file`."""

    __slots__ = ("_source", "_data")

    def __init__(self, source: ImageSource, data: str | Path) -> None:
        self._source = source
        self._data = data

    @classmethod
    def url(cls, url: str) -> Image:
        if not url or not url.strip():
            raise InvalidArgument("The image url should not be empty.")
        return cls(ImageSource.URL, url)

    @classmethod
    def base64(cls, payload: str) -> Image:
        if not payload or not payload.strip():
            raise InvalidArgument("The base64 image data should not be empty.")
        return cls(ImageSource.BASE64, payload)

    @classmethod
    def file(cls, path: str | Path) -> Image:
        file_path = Path(path)
        if not file_path.is_file():
            raise InvalidArgument(f"The image file does not exist: {file_path}")
        return cls(ImageSource.FILE, file_path)

    @property
    def source(self) -> ImageSource:
        return self._source

    @property
    def data(self) -> str | Path:
        """URL, base64 text or file path depending on the source."""

        return self._data

    @property
    def param_key(self) -> str:
        return _PARAM_KEYS[self._source]

    def is_url(self) -> bool:
        return self._source is ImageSource.URL

    def is_base64(self) -> bool:
        return self._source is ImageSource.BASE64

    def is_file(self) -> bool:
        return self._source is ImageSource.FILE

    def read_bytes(self) -> bytes:
        """Raw bytes of a file image (read lazily at upload time)."""

        if not self.is_file():
            raise InvalidArgument("Only file images carry raw bytes.")
        return Path(self._data).read_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self._source is other._source and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._source, self._data))

    def __repr__(self) -> str:
        return f"Image(source={self._source.value!r}, data={str(self._data)[:60]!r})"
