import sqlite3

import pytest

from blog_api.app.core.db import MIGRATIONS, get_database_path, init_db, transaction
from blog_api.app.core.config import settings


def test_relative_database_url_resolves_against_project_root(monkeypatch):
    monkeypatch.setattr(settings, "database_url", "blog.db")
    path = get_database_path()
    assert path.endswith("blog.db")
    assert not path.endswith("blog_api/blog.db")


def test_init_db_applies_every_migration_once(db_path):
    init_db()

    with transaction() as conn:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
        tables = {
            row["name"]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        }

    assert versions == [version for version, _ in MIGRATIONS]
    assert {"blogs", "entries", "audit_logs"} <= tables


def test_transaction_rolls_back_on_error(db_path):
    with pytest.raises(RuntimeError):
        with transaction() as conn:
            conn.execute("INSERT INTO blogs (name, handle) VALUES ('name', 'h')")
            raise RuntimeError("boom")

    with transaction() as conn:
        assert conn.execute("SELECT COUNT(*) FROM blogs").fetchone()[0] == 0


def test_entries_require_existing_blog(db_path):
    with pytest.raises(sqlite3.IntegrityError):
        with transaction() as conn:
            conn.execute(
                "INSERT INTO entries (title, content, date, blog_id) VALUES ('t', 'c', '2025-01-01', 42)"
            )
