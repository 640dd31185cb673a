"""Shared telemetry: logging setup."""

from access_admin.shared.telemetry.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
