"""Interactive partition mount/unmount helper."""

__version__ = "0.1.0"
