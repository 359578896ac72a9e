"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, which is what the voice
integration test rigs expect.  Override values via environment
variables before importing this module.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Senpilot Utilities API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the versioned router is mounted.  Empty by
    # default so that the voice platform can call ``/csr-utilities/...``
    # directly.  Set to e.g. ``/api/v1`` when running behind a gateway.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Comma‑separated list of allowed CORS origins.  ``*`` allows all.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Which record store backs the lookups: ``memory`` serves the
    # fixture snapshot directly, ``sqlite`` seeds an SQLite file from the
    # same fixtures at startup and reads from it.
    record_store: str = os.getenv("RECORD_STORE", "memory")

    # Path for the SQLite database when ``record_store`` is ``sqlite``.
    # Relative paths are resolved against the project root by ``db``.
    database_url: str = os.getenv("DATABASE_URL", "utility_csr.db")

    # Number of most recent billing cycles used for usage analysis and
    # billing history.
    history_window: int = int(os.getenv("HISTORY_WINDOW", "6"))

    # Relative band around the mean usage inside which a trend is
    # reported as stable (0.10 means +/-10%).
    trend_band: float = float(os.getenv("TREND_BAND", "0.10"))

    def __post_init__(self) -> None:
        if self.history_window < 1:
            raise ValueError(f"HISTORY_WINDOW must be at least 1, got {self.history_window}")
        if not 0 <= self.trend_band < 1:
            raise ValueError(f"TREND_BAND must be in [0, 1), got {self.trend_band}")

    def allowed_origins(self) -> list:
        """Return CORS origins as a list, dropping empty entries."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
