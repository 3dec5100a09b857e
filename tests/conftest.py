# File: tests/conftest.py

import pytest
import os
import sys
import tempfile
from pathlib import Path
from sqlalchemy import text
from sqlalchemy_utils import database_exists, create_database

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Point the activity log at a throwaway SQLite file BEFORE the engine is built
TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="readonly_cleaner_tests_"))
os.environ["READONLY_CLEANER_DATABASE_URL"] = f"sqlite:///{TEST_DB_DIR / 'activity_log_test.db'}"

from readonly_cleaner.core.database.base import Base
from readonly_cleaner.core.database.connection import engine, init_db


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Ensures DB exists and tables are registered.
    """
    if not database_exists(engine.url):
        create_database(engine.url)

    init_db()

    yield

    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Runs before EVERY test.
    Empties every activity log table.
    """
    with engine.connect() as conn:
        trans = conn.begin()
        # We disable foreign key checks temporarily to allow deleting in any order
        conn.execute(text("PRAGMA foreign_keys = OFF;"))
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(text(f'DELETE FROM "{table.name}";'))
        conn.execute(text("PRAGMA foreign_keys = ON;"))
        trans.commit()

    yield


@pytest.fixture
def project_tree(tmp_path):
    """
    Creates a nested folder structure like a checked-out solution:
    - 1 solution file at the root
    - 1 read-only source file
    - 1 hidden dotfile and 1 file inside .git (nothing is skipped)
    - 1 file in build output
    """
    root = tmp_path / "solution"
    root.mkdir()

    (root / "App.sln").write_text("Microsoft Visual Studio Solution File")

    src = root / "src"
    src.mkdir()
    locked = src / "Program.cs"
    locked.write_text("class Program {}")
    locked.chmod(0o444)

    (root / ".editorconfig").write_text("root = true")

    git_dir = root / ".git"
    git_dir.mkdir()
    (git_dir / "HEAD").write_text("ref: refs/heads/main")

    bin_dir = root / "bin" / "Debug"
    bin_dir.mkdir(parents=True)
    (bin_dir / "App.dll").write_bytes(b"MZ")

    return root
