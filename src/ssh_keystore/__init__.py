from .models import KeyEntry, BlobStore
from .errors import StoreError, InvalidKeyFormat, InvalidKeyName, StoreIOError
from .validator import validate, describe, KeyInfo
from .naming import unique_name, check_name
from .store import CredentialStore
from .importer import ImportEngine, ImportResult, ImportFailure
from .backends import DirectoryBlobStore
from .config import (
    load_extensions,
    filter_files_by_extension,
    matches_extension,
    default_store_dir,
    DEFAULT_EXTENSIONS,
)

__all__ = [
    "KeyEntry",
    "BlobStore",
    "StoreError",
    "InvalidKeyFormat",
    "InvalidKeyName",
    "StoreIOError",
    "validate",
    "describe",
    "KeyInfo",
    "unique_name",
    "check_name",
    "CredentialStore",
    "ImportEngine",
    "ImportResult",
    "ImportFailure",
    "DirectoryBlobStore",
    "load_extensions",
    "filter_files_by_extension",
    "matches_extension",
    "default_store_dir",
    "DEFAULT_EXTENSIONS",
]
