"""Application layer: use cases, services, DTOs and repository ports."""
