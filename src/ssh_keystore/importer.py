from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .errors import StoreError, StoreIOError
from .config import filter_files_by_extension
from .store import CredentialStore


@dataclass
class ImportFailure:
    name: str
    error: StoreError


@dataclass
class ImportResult:
    imported: list[str] = field(default_factory=list)
    failed: list[ImportFailure] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class ImportEngine:
    def __init__(self, store: CredentialStore, extensions: list[str] | None = None):
        self.store = store
        self.extensions = extensions

    def import_pairs(self, pairs: Iterable[tuple[str, bytes]] | None) -> ImportResult:
        """Add each (suggested name, content) pair to the store in order.

        A failing pair is recorded and does not stop the rest of the batch.
        None means the request was cancelled and nothing is touched.
        """
        result = ImportResult()
        if pairs is None:
            return result

        for suggested_name, data in pairs:
            try:
                entry = self.store.add(suggested_name, data)
            except StoreError as exc:
                result.failed.append(ImportFailure(suggested_name, exc))
            else:
                result.imported.append(entry.name)

        return result

    def import_files(
        self, paths: list[Path] | None, all_extensions: bool = False
    ) -> ImportResult:
        """Import key files from disk, using each file's name as the key name."""
        if not paths:
            return ImportResult()

        accepted = (
            list(paths)
            if all_extensions
            else filter_files_by_extension(paths, self.extensions)
        )
        skipped = [p.name for p in paths if p not in accepted]

        pairs = []
        unreadable = []
        for path in accepted:
            try:
                pairs.append((path.name, path.read_bytes()))
            except OSError as exc:
                error = StoreIOError(f"cannot read file: {exc}", path.name)
                unreadable.append(ImportFailure(path.name, error))

        result = self.import_pairs(pairs)
        result.failed[:0] = unreadable
        result.skipped.extend(skipped)
        return result
