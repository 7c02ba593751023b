"""Screen state models."""
