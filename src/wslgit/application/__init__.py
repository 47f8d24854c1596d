"""Application layer wiring features to configuration."""
