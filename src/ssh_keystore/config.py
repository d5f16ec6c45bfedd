import os
import re
from pathlib import Path

DEFAULT_CONFIG_PATH = Path.home() / ".config/ssh-keystore/config"

STORE_DIR_ENV = "SSH_KEYSTORE_DIR"

# File extensions offered when importing keys (a hint, not a security check)
DEFAULT_EXTENSIONS = [
    ".pem",
    ".key",
    ".ssh",
    ".ppk",
]


def default_store_dir() -> Path:
    """Return the key directory from the environment, or the per-user default."""
    if override := os.environ.get(STORE_DIR_ENV):
        return Path(override).expanduser()
    if os.name == "nt":
        base = Path(os.environ.get("LOCALAPPDATA", "~"))
    else:
        base = Path(os.environ.get("XDG_DATA_HOME", "~/.local/share"))
    return base.expanduser() / "ssh-keystore" / "keys"


def matches_extension(
    name: str, extensions: list[str] | None = None, case_sensitive: bool = False
) -> bool:
    """Check if a file name ends with one of the accepted extensions."""
    extensions = extensions or DEFAULT_EXTENSIONS
    check_name = name if case_sensitive else name.lower()
    check_extensions = extensions if case_sensitive else [e.lower() for e in extensions]
    return any(check_name.endswith(ext) for ext in check_extensions)


def filter_files_by_extension(
    paths: list[Path], extensions: list[str] | None = None, case_sensitive: bool = False
) -> list[Path]:
    """Filter a list of paths to only those with an accepted extension."""
    return [p for p in paths if matches_extension(p.name, extensions, case_sensitive)]


def load_extensions(config_path: Path | None = None) -> list[str]:
    """Load accepted extensions from config file, or return defaults."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return list(DEFAULT_EXTENSIONS)

    content = path.read_text()
    match = re.search(r"KEY_EXTENSIONS=\(([^)]+)\)", content)
    if not match:
        return list(DEFAULT_EXTENSIONS)

    extensions = [e if e.startswith(".") else f".{e}" for e in match.group(1).split()]
    return list(dict.fromkeys(extensions))  # Dedupe preserving order
