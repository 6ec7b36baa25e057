"""grail — aggregate tool manifests into a prompt for terminal agents."""

__version__ = "0.1.0"
