"""Map Discovery Service."""
