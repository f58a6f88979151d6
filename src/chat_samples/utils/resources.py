"""Access to the resource files the samples read.

Files are addressed by name relative to one resource directory. By default
that is the ``resources`` directory shipped inside the package; the
``CHAT_SAMPLES_RESOURCES_DIR`` setting points it somewhere else.
"""

import base64
from pathlib import Path
from typing import BinaryIO

from chat_samples.core.errors import ResourceNotFoundError

BUNDLED_RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"

MEDIA_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


class ResourceStore:
    """Reads text, JSON and binary files from a resource directory."""

    def __init__(self, root: Path | str | None = None) -> None:
        self.root = Path(root) if root is not None else BUNDLED_RESOURCES_DIR

    def path(self, name: str) -> Path:
        return self.root / name

    def exists(self, name: str) -> bool:
        return self.path(name).is_file()

    def _require(self, name: str) -> Path:
        path = self.path(name)
        if not path.is_file():
            raise ResourceNotFoundError(str(path))
        return path

    def read_text(self, name: str) -> str:
        """Read a text file.

        Raises:
            ResourceNotFoundError: If the file does not exist.
        """
        return self._require(name).read_text(encoding="utf-8")

    def read_bytes(self, name: str) -> bytes:
        """Read a file as bytes.

        Raises:
            ResourceNotFoundError: If the file does not exist.
        """
        return self._require(name).read_bytes()

    def open_stream(self, name: str) -> BinaryIO:
        """Open a file for binary reading; the caller closes it."""
        return self._require(name).open("rb")

    def data_uri(self, name: str) -> str:
        """Encode a file as a base64 ``data:`` URI.

        The media type comes from the file suffix and defaults to JPEG.
        """
        media_type = MEDIA_TYPES.get(Path(name).suffix.lower(), "image/jpeg")
        encoded = base64.standard_b64encode(self.read_bytes(name)).decode("utf-8")
        return f"data:{media_type};base64,{encoded}"
