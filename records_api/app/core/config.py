"""
Environment-driven configuration.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  A module-level
``settings`` instance is built at import time; ``create_app`` accepts
an explicit ``Settings`` so that tests can point the document store at
a temporary directory without touching the environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _bool_env(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Records API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _bool_env("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Directory holding ``employee.json`` and ``customer.json``.  A
    # relative path is resolved against the project root by
    # ``get_data_dir``.
    data_dir: str = field(default_factory=lambda: os.getenv("DATA_DIR", "data"))

    # When enabled, missing documents are created empty at startup
    # instead of failing every request with a 500.
    init_documents: bool = field(default_factory=lambda: _bool_env("RECORDS_INIT_DOCUMENTS", "true"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    def get_data_dir(self) -> Path:
        """Return the absolute data directory."""
        path = Path(self.data_dir)
        if path.is_absolute():
            return path
        base_dir = Path(__file__).resolve().parent.parent.parent.parent
        return (base_dir / path).resolve()


# Environment variables must be set before this module is imported for
# them to affect the shared instance.
settings = Settings()
