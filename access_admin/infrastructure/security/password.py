"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a
fixed-length input so long passwords are not silently truncated. bcrypt
calls block; the service runs them via asyncio.to_thread.
"""

import base64
import hashlib

import bcrypt


def _prehash(plaintext: str) -> bytes:
    return base64.b64encode(hashlib.sha256(plaintext.encode("utf-8")).digest())


class BcryptPasswordHasher:
    """IPasswordHasher backed by bcrypt. rounds is the bcrypt cost factor."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Return a salted bcrypt digest of plaintext."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_prehash(plaintext), salt).decode("utf-8")

    def compare(self, plaintext: str, digest: str) -> bool:
        """Return True if plaintext matches digest; False for malformed digests."""
        try:
            return bool(bcrypt.checkpw(_prehash(plaintext), digest.encode("utf-8")))
        except (ValueError, TypeError):
            return False
