"""Test environment: point settings at SQLite before the app modules are imported."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-with-at-least-32-bytes-of-key")
os.environ.setdefault("BOARD_LIST_SIZE", "10")
os.environ.setdefault("ADMIN_USER_LIST_SIZE", "10")
