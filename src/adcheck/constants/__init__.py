"""Static constants for adcheck."""
