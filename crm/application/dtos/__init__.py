"""Application DTOs: read-models and inputs passed between layers (no ORM)."""
