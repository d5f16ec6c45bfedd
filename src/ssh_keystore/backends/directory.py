"""Directory backend: one file per stored key."""

import logging
import os
import tempfile
from pathlib import Path

from ..errors import StoreIOError
from ..naming import check_name

logger = logging.getLogger(__name__)


class DirectoryBlobStore:
    """BlobStore implementation keeping each key in its own file under root.

    Files are written to a hidden staging file first and moved into place with
    os.replace, so an existing key is overwritten in a single step and a failed
    write never leaves a partial file behind.
    """

    DIR_MODE = 0o700
    FILE_MODE = 0o600

    def __init__(self, root: str | Path):
        self.root = Path(root).expanduser()

    def _path(self, name: str) -> Path:
        if reason := check_name(name):
            raise StoreIOError(reason, name)
        return self.root / name

    def ensure_exists(self) -> None:
        try:
            self.root.mkdir(mode=self.DIR_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreIOError(f"cannot create key directory {self.root}: {exc}") from exc

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()

    def names(self) -> list[str]:
        try:
            files = [entry.name for entry in self.root.iterdir() if entry.is_file()]
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StoreIOError(f"cannot list key directory {self.root}: {exc}") from exc

        names = []
        for name in files:
            # Staging files and names no key can have
            if reason := check_name(name):
                logger.debug("Ignoring %s in %s: %s", name, self.root, reason)
                continue
            names.append(name)
        return sorted(names)

    def read(self, name: str) -> bytes:
        path = self._path(name)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StoreIOError(f"cannot read key file: {exc}", name) from exc

    def write(self, name: str, data: bytes) -> None:
        path = self._path(name)
        self.ensure_exists()
        try:
            fd, staging = tempfile.mkstemp(prefix=".", suffix=".tmp", dir=self.root)
        except OSError as exc:
            raise StoreIOError(f"cannot write key file: {exc}", name) from exc
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            if os.name != "nt":
                os.chmod(staging, self.FILE_MODE)
            os.replace(staging, path)
        except OSError as exc:
            Path(staging).unlink(missing_ok=True)
            raise StoreIOError(f"cannot write key file: {exc}", name) from exc
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def delete(self, name: str) -> None:
        path = self._path(name)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StoreIOError(f"cannot delete key file: {exc}", name) from exc
        logger.debug("Deleted %s", path)
