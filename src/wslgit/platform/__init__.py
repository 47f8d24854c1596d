"""Cross-cutting platform services (logging)."""
