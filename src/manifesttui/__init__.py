"""Terminal editor for repo manifests."""

__version__ = "0.1.0"
