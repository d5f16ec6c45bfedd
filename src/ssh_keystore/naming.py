from typing import Callable

NamingStrategy = Callable[[str, Callable[[str], bool]], str]

_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def check_name(name: str) -> str | None:
    """Return why name cannot address a stored key, or None if it can."""
    if not name:
        return "name is empty"
    if name in (".", ".."):
        return "name is reserved"
    if name.startswith("."):
        return "name must not start with '.'"
    if any(char in name for char in _FORBIDDEN_CHARS):
        return "name must not contain path separators"
    return None


def split_extension(name: str) -> tuple[str, str]:
    """Split 'id_rsa.pem' into ('id_rsa', '.pem'); names without a suffix keep ''."""
    stem, dot, suffix = name.rpartition(".")
    if not dot or not stem:
        return name, ""
    return stem, f".{suffix}"


def unique_name(candidate: str, taken: Callable[[str], bool]) -> str:
    """Return candidate, or the first 'stem (n).ext' variant not already taken."""
    if not taken(candidate):
        return candidate
    stem, extension = split_extension(candidate)
    counter = 2
    while taken(name := f"{stem} ({counter}){extension}"):
        counter += 1
    return name
