"""
Static configuration for the catalog service.

The service deliberately reads nothing from the environment: it
listens on a fixed port and keeps all of its state in memory. The
values live on a ``Settings`` dataclass so that tests can build an
app with different settings without patching module globals.
"""

from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings with fixed defaults."""

    project_name: str = "Book Catalog API"
    api_version: str = "1.0.0"
    description: str = (
        "In-memory book catalogue with reviews and a minimal "
        "registration/login flow."
    )
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


# Shared instance used by ``main`` and ``__main__``.
settings = Settings()
