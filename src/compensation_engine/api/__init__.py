"""HTTP preview service for the compensation engine."""
