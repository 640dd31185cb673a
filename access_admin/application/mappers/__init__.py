"""Mappers between API schemas and ORM entities."""

from access_admin.application.mappers.user_mapper import UserMapper

__all__ = ["UserMapper"]
