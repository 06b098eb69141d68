"""Application layer: DTOs, services and use cases."""
