"""Infrastructure adapters (logging)."""
