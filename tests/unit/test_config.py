"""Settings validation."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings

DB_URL = "sqlite+aiosqlite://"


def test_defaults_are_valid() -> None:
    settings = Settings(database_url=DB_URL)
    assert settings.search_default_limit == 20
    assert settings.search_max_limit == 100


@pytest.mark.parametrize("max_limit", [0, 101, 500])
def test_search_max_limit_stays_within_one_to_hundred(max_limit: int) -> None:
    with pytest.raises(ValidationError, match="search_max_limit"):
        Settings(database_url=DB_URL, search_max_limit=max_limit, search_default_limit=1)


def test_default_limit_cannot_exceed_max() -> None:
    with pytest.raises(ValidationError, match="search_default_limit"):
        Settings(database_url=DB_URL, search_max_limit=10, search_default_limit=20)


def test_database_url_is_required() -> None:
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(database_url="", _env_file=None)
