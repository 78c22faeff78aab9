"""Interactive bank account manager backed by a plain text account file."""

__version__ = "0.1.0"
__all__ = ["cli", "logbook", "models", "store", "validation"]