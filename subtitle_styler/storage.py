"""Storage seam for fetching SRT sources and storing ASS results.

WHY: In production the SRT comes from, and the ASS goes back to, object
storage. The engine performs no I/O itself, so the request handler takes a
storage object by injection. LocalStorage gives the CLI and the tests a
filesystem-backed implementation with the same bucket/key addressing.

HOW: BaseStorage is an ABC with get_bytes/put_bytes. LocalStorage maps
``bucket/key`` to ``root/bucket/key`` and creates parent directories on
write.

RULES:
- Keys may contain slashes; they become subdirectories
- Keys must stay inside their bucket directory (no ``..`` escapes)
- Missing objects raise FileNotFoundError
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class BaseStorage(ABC):
    """Abstract bucket/key byte store."""

    @abstractmethod
    def get_bytes(self, bucket: str, key: str) -> bytes:
        """Return the object stored at ``bucket``/``key``."""

    @abstractmethod
    def put_bytes(self, bucket: str, key: str, data: bytes) -> None:
        """Store ``data`` at ``bucket``/``key``, replacing any existing object."""


class LocalStorage(BaseStorage):
    """Filesystem-backed storage rooted at a directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root).resolve()

    def _path(self, bucket: str, key: str) -> Path:
        bucket_dir = (self.root / bucket).resolve()
        path = (bucket_dir / key).resolve()
        if bucket_dir != self.root and self.root not in bucket_dir.parents:
            raise ValueError("Bucket escapes storage root: {}".format(bucket))
        if bucket_dir not in path.parents:
            raise ValueError("Key escapes bucket {}: {}".format(bucket, key))
        return path

    def get_bytes(self, bucket: str, key: str) -> bytes:
        logger.debug("getObject bucket=%s key=%s", bucket, key)
        path = self._path(bucket, key)
        if not path.is_file():
            raise FileNotFoundError("No object at bucket={} key={}".format(bucket, key))
        return path.read_bytes()

    def put_bytes(self, bucket: str, key: str, data: bytes) -> None:
        logger.debug("putObject bucket=%s key=%s", bucket, key)
        path = self._path(bucket, key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
