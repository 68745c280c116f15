"""Root conftest — shared test configuration."""

import os

# Settings are read when todo_api.main is imported; point them at SQLite first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
