"""Shared infrastructure-free helpers: telemetry (logging). No business logic."""
