from dataclasses import dataclass, field
from typing import Protocol
from abc import abstractmethod


@dataclass(frozen=True)
class KeyEntry:
    name: str
    data: bytes = field(repr=False)


class BlobStore(Protocol):
    """Durable area holding one named blob per key entry."""

    @abstractmethod
    def ensure_exists(self) -> None: ...

    @abstractmethod
    def exists(self, name: str) -> bool: ...

    @abstractmethod
    def names(self) -> list[str]: ...

    @abstractmethod
    def read(self, name: str) -> bytes: ...

    @abstractmethod
    def write(self, name: str, data: bytes) -> None: ...

    @abstractmethod
    def delete(self, name: str) -> None: ...
