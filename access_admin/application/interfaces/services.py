"""Service interfaces (ports) for the application layer."""

from typing import Protocol


class IPasswordHasher(Protocol):
    """One-way credential hashing with constant-time comparison."""

    def hash(self, plaintext: str) -> str:
        """Return a salted digest of plaintext."""

    def compare(self, plaintext: str, digest: str) -> bool:
        """Return True if plaintext matches digest (constant time)."""
