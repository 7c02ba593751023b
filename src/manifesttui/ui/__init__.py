"""Terminal user interface package."""
