import pytest
from fastapi.testclient import TestClient

from blog_api.app.core.config import settings
from blog_api.app.core.db import init_db, transaction
from blog_api.app.main import create_app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "blog.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def conn(db_path):
    with transaction() as connection:
        yield connection


@pytest.fixture
def client(db_path):
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def seed(db_path):
    """Insert blogs and entries directly; returns nothing."""

    def _seed(blogs):
        with transaction() as connection:
            for blog_id, entries in blogs.items():
                connection.execute(
                    "INSERT INTO blogs (id, name, handle) VALUES (?, ?, ?)",
                    (blog_id, f"blog {blog_id}", f"b{blog_id}"),
                )
                for entry_id, title, content in entries:
                    connection.execute(
                        "INSERT INTO entries (id, title, content, date, blog_id) VALUES (?, ?, ?, ?, ?)",
                        (entry_id, title, content, "2025-09-01T10:00:00+00:00", blog_id),
                    )

    return _seed
