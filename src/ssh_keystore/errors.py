class StoreError(Exception):
    """Base class for every failure surfaced by the key store."""

    def __init__(self, reason: str, name: str | None = None):
        super().__init__(reason)
        self.reason = reason
        self.name = name

    def __str__(self) -> str:
        if self.name:
            return f"{self.name}: {self.reason}"
        return self.reason


class InvalidKeyFormat(StoreError):
    """The buffer is not a recognized private key container."""


class InvalidKeyName(StoreError):
    """The name cannot be used to address a stored key."""


class StoreIOError(StoreError):
    """Reading, writing or deleting in the backing location failed."""
