"""Application interfaces (ports): repository and service protocols."""

from access_admin.application.interfaces.repositories import IUserRepository
from access_admin.application.interfaces.services import IPasswordHasher

__all__ = ["IPasswordHasher", "IUserRepository"]
