import os
import pytest
from pathlib import Path
from readonly_cleaner.core.config.settings import settings
from readonly_cleaner.core.database.connection import init_db

@pytest.mark.skipif("READONLY_CLEANER_DATA_DIR" in os.environ, reason="Data dir overridden by environment")
def test_default_data_dir_is_per_user():
    """The package may be installed into read-only site-packages, so data never lives beside it."""
    assert settings.DATA_DIR == Path.home() / ".readonly_cleaner"

def test_init_db_creates_default_data_dir(tmp_path, monkeypatch):
    data_dir = tmp_path / "user_data"
    monkeypatch.setattr(settings, "DATA_DIR", data_dir)
    monkeypatch.delenv("READONLY_CLEANER_DATABASE_URL")
    assert settings.DATABASE_URL == settings.DEFAULT_DATABASE_URL

    init_db()

    assert data_dir.is_dir()
