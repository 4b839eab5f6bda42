"""Alembic migrations build a usable schema on a file-backed SQLite database."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, text

from app.core.config import settings

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _make_alembic_config() -> Config:
    """Alembic config pointing at the project migrations, without ini logging setup."""
    cfg = Config()
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    return cfg


class TestUpgradeHeadOnSqlite(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.url = f"sqlite:///{Path(self._tmp.name) / 'board.db'}"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_posts_insert_gets_created_at_default(self) -> None:
        with patch.object(settings, "DATABASE_URL", self.url):
            command.upgrade(_make_alembic_config(), "head")

        engine = create_engine(self.url)
        try:
            with engine.begin() as conn:
                conn.execute(
                    text("INSERT INTO users (email, name, role) VALUES ('a@x.com', 'a', 'member')")
                )
                conn.execute(
                    text("INSERT INTO posts (title, content, user_id) VALUES ('t', 'c', 1)")
                )
                created_at = conn.execute(text("SELECT created_at FROM posts")).scalar_one()
        finally:
            engine.dispose()
        self.assertIsNotNone(created_at)

    def test_downgrade_to_base_drops_tables(self) -> None:
        cfg = _make_alembic_config()
        with patch.object(settings, "DATABASE_URL", self.url):
            command.upgrade(cfg, "head")
            command.downgrade(cfg, "base")

        engine = create_engine(self.url)
        try:
            with engine.connect() as conn:
                tables = conn.execute(
                    text("SELECT name FROM sqlite_master WHERE type = 'table'")
                ).scalars().all()
        finally:
            engine.dispose()
        self.assertNotIn("posts", tables)
        self.assertNotIn("users", tables)


if __name__ == "__main__":
    unittest.main()
