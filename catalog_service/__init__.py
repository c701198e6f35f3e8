"""In-memory book catalogue with reviews and a minimal login flow."""

__version__ = "1.0.0"
