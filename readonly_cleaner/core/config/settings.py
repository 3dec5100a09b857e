# File: readonly_cleaner/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    # Per-user location; the package directory may be read-only site-packages
    DATA_DIR: Path = Path(os.getenv("READONLY_CLEANER_DATA_DIR", str(Path.home() / ".readonly_cleaner")))

    # --- Activity Log Database ---
    @property
    def DEFAULT_DATABASE_URL(self) -> str:
        return f"sqlite:///{self.DATA_DIR / 'activity_log.db'}"

    @property
    def DATABASE_URL(self) -> str:
        # Read at access time so tests can point it elsewhere before the engine is built.
        return os.getenv("READONLY_CLEANER_DATABASE_URL", self.DEFAULT_DATABASE_URL)

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("READONLY_CLEANER_LOG_LEVEL", "INFO").upper()

    # --- CLI ---
    HISTORY_LIMIT: int = int(os.getenv("READONLY_CLEANER_HISTORY_LIMIT", "10"))

    def ensure_dirs(self):
        """Creates the data directory if it doesn't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
