"""Domain layer: protocols shared across utilbox packages."""
