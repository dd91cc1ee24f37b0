"""
Content Store

Persists uploaded cover images on the local filesystem. The uploads router
serves the same directory under ``/uploads``, so a stored path such as
``uploads/1718000000000-dune.jpg`` is also its URL path.

Files are written synchronously before the book record is saved. If the
database write fails afterwards the file stays on disk.
"""

import logging
import shutil
import time
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

URL_PREFIX = "uploads"


class ContentStore:
    """
    Directory-backed store for uploaded files.

    Usage:
        store = ContentStore("uploads")
        path = store.save("dune.jpg", upload.file)
        # path == "uploads/1718000000000-dune.jpg"
    """

    def __init__(self, directory: str | Path, url_prefix: str = URL_PREFIX) -> None:
        self.directory = Path(directory)
        self.url_prefix = url_prefix.strip("/")

    def ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def make_filename(original_name: str) -> str:
        """
        Build a stored file name: ``<epoch millis>-<original name>``.

        Any directory components of the client-supplied name are dropped.
        """
        base_name = Path(original_name.replace("\\", "/")).name or "upload"
        return f"{int(time.time() * 1000)}-{base_name}"

    def save(self, original_name: str, stream: BinaryIO) -> str:
        """
        Write an uploaded file and return its stored path.

        Args:
            original_name: File name as sent by the client
            stream: Readable binary stream with the file contents

        Returns:
            URL path of the stored file, e.g. ``uploads/<name>``
        """
        self.ensure_directory()
        filename = self.make_filename(original_name)
        destination = self.directory / filename

        with destination.open("wb") as out:
            shutil.copyfileobj(stream, out)

        logger.info(f"Stored upload {original_name!r} as {destination}")
        return f"{self.url_prefix}/{filename}"

    def resolve(self, stored_path: str) -> Path:
        """Map a stored path back to its location on disk."""
        name = stored_path.rsplit("/", 1)[-1]
        return self.directory / name
