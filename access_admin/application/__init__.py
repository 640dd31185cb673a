"""Application layer: DTOs, ports, mappers and the user lifecycle service."""
