"""Infrastructure adapters (reference data, settings, logging)."""
