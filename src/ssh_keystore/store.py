"""In-memory index of stored keys backed by a durable BlobStore."""

from __future__ import annotations

import logging
import threading

from . import validator
from .errors import InvalidKeyName
from .models import BlobStore, KeyEntry
from .naming import NamingStrategy, check_name, unique_name

logger = logging.getLogger(__name__)


class CredentialStore:
    """Owns the set of stored private keys.

    The backing location is the durable source of truth; the index mirrors it
    and is loaded on first access. One lock serializes every mutation and
    every snapshot, and each durable write or delete happens before the index
    is touched, so callers never observe a half-finished add or remove.
    """

    def __init__(self, backend: BlobStore, naming: NamingStrategy = unique_name):
        self.backend = backend
        self.naming = naming
        self._lock = threading.RLock()
        self._entries: dict[str, KeyEntry] | None = None

    def _index(self) -> dict[str, KeyEntry]:
        if self._entries is None:
            self._entries = self._load()
        return self._entries

    def _load(self) -> dict[str, KeyEntry]:
        self.backend.ensure_exists()
        entries = {}
        for name in self.backend.names():
            entries[name] = KeyEntry(name, self.backend.read(name))
        logger.debug("Loaded %d keys", len(entries))
        return entries

    def reload(self) -> None:
        """Re-read the backing location, discarding the current index."""
        with self._lock:
            self._entries = self._load()

    def list(self) -> list[KeyEntry]:
        """Return a snapshot of all entries sorted by name."""
        with self._lock:
            return sorted(self._index().values(), key=lambda entry: entry.name)

    def names(self) -> list[str]:
        return [entry.name for entry in self.list()]

    def lookup(self, name: str) -> KeyEntry | None:
        with self._lock:
            return self._index().get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._index())

    def add(self, candidate_name: str, buffer: bytes) -> KeyEntry:
        """Validate and persist a key, replacing any entry with the final name.

        A candidate name that is already indexed is replaced in place. A name
        held by a file in the backing location that the index does not know
        about is never overwritten; the naming strategy picks a free name.

        Raises:
            InvalidKeyName: If candidate_name cannot address a stored key.
            InvalidKeyFormat: If buffer is not a structurally valid key.
            StoreIOError: If the key cannot be written.
        """
        if reason := check_name(candidate_name):
            raise InvalidKeyName(reason, candidate_name)
        validator.validate(buffer)
        data = bytes(buffer)

        with self._lock:
            entries = self._index()
            if candidate_name in entries:
                name = candidate_name
            else:
                name = self.naming(
                    candidate_name,
                    lambda n: n in entries or self.backend.exists(n),
                )
                if name != candidate_name:
                    logger.debug("Name %r is taken, storing as %r", candidate_name, name)

            self.backend.write(name, data)
            entry = KeyEntry(name, data)
            entries[name] = entry
            logger.debug("Stored key %r (%d bytes)", name, len(data))
            return entry

    def remove(self, name: str) -> None:
        """Delete a stored key; a name that is not stored is ignored.

        Raises:
            StoreIOError: If the key file cannot be deleted. The entry stays.
        """
        with self._lock:
            entries = self._index()
            if name not in entries:
                return
            self.backend.delete(name)
            del entries[name]
            logger.debug("Removed key %r", name)
