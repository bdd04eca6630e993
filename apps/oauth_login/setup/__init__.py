"""Application setup (config, logging, dependencies)."""
