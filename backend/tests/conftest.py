"""Root conftest — shared test configuration."""

import os

# Ensure tests never point at a real database or admin secret
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ["ADMIN_TOKEN"] = "test-admin-token"
os.environ.setdefault("LOG_FORMAT", "text")
