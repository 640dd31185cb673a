"""Security infrastructure: password hashing."""

from access_admin.infrastructure.security.password import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher"]
