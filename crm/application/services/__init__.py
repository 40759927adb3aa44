"""Application services: pure domain logic shared by use cases (no I/O)."""
