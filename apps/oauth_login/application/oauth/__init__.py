"""OAuth application layer."""
