import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from ssh_keystore.errors import StoreIOError


class MockBlobStore:
    """In-memory BlobStore that records calls and can be told to fail."""

    def __init__(self, blobs: dict[str, bytes] | None = None):
        self.blobs = dict(blobs or {})
        self.calls: list[str] = []
        self.fail_write = False
        self.fail_delete = False
        self.fail_read = False

    def ensure_exists(self) -> None:
        self.calls.append("ensure_exists")

    def exists(self, name: str) -> bool:
        return name in self.blobs

    def names(self) -> list[str]:
        self.calls.append("names")
        return sorted(self.blobs)

    def read(self, name: str) -> bytes:
        self.calls.append(f"read:{name}")
        if self.fail_read:
            raise StoreIOError("disk error", name)
        return self.blobs[name]

    def write(self, name: str, data: bytes) -> None:
        self.calls.append(f"write:{name}")
        if self.fail_write:
            raise StoreIOError("disk full", name)
        self.blobs[name] = data

    def delete(self, name: str) -> None:
        self.calls.append(f"delete:{name}")
        if self.fail_delete:
            raise StoreIOError("permission denied", name)
        self.blobs.pop(name, None)


@pytest.fixture
def backend():
    return MockBlobStore()


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def openssh_key():
    """Unencrypted Ed25519 key in OpenSSH format."""
    return ed25519.Ed25519PrivateKey.generate().private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.OpenSSH,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def other_openssh_key():
    return ed25519.Ed25519PrivateKey.generate().private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.OpenSSH,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def rsa_pem(rsa_key):
    """'BEGIN RSA PRIVATE KEY' block."""
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def ec_pem():
    return ec.generate_private_key(ec.SECP256R1()).private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def pkcs8_pem(rsa_key):
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def encrypted_rsa_pem(rsa_key):
    """Legacy OpenSSL encryption with Proc-Type and DEK-Info headers."""
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.BestAvailableEncryption(b"secret"),
    )


@pytest.fixture(scope="session")
def encrypted_pkcs8_pem(rsa_key):
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.BestAvailableEncryption(b"secret"),
    )
