"""Service applications."""
