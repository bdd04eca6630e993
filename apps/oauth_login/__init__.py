"""OAuth Login Service."""
