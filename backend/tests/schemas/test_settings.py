"""Settings — environment-driven configuration bounds.

Invariants:
    - admin_token has no usable default
    - excerpt_length stays within the excerpt column (300 chars incl. "...")
"""

import pytest
from pydantic import ValidationError

from app.config import Settings


def test_admin_token_defaults_to_empty(monkeypatch):
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    assert Settings(_env_file=None).admin_token == ""


def test_postgres_url_normalized_to_asyncpg():
    settings = Settings(_env_file=None, database_url="postgresql://u:p@h/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@h/db"


@pytest.mark.parametrize("length", [1, 200, 297])
def test_excerpt_length_within_column(length):
    assert Settings(_env_file=None, excerpt_length=length).excerpt_length == length


@pytest.mark.parametrize("length", [0, 298, 1000])
def test_excerpt_length_overflowing_column_rejected(length):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, excerpt_length=length)
