from __future__ import annotations
import hashlib


def sha256_of_bytes(data: bytes) -> str:
    """Return SHA256 hash of bytes."""
    return hashlib.sha256(data).hexdigest()


def short_digest(data: bytes, length: int = 12) -> str:
    """Prefix of the SHA256 hex digest, used to tag inputs in logs."""
    return sha256_of_bytes(data)[:length]
