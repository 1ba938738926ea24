"""Integration tests for Database (SQLite via aiosqlite)."""

import pytest
from sqlalchemy import inspect

from src.infrastructure.persistence.database import Database


@pytest.mark.integration
class TestDatabase:
    async def test_check_connection(self, database):
        assert await database.check_connection() is True

    async def test_create_all_builds_credential_tables(self, database):
        async with database.engine.connect() as conn:
            tables = await conn.run_sync(lambda sync: inspect(sync).get_table_names())

        assert {
            "accounts",
            "email_verification_tokens",
            "password_reset_tokens",
            "refresh_tokens",
        } <= set(tables)

    async def test_unreachable_database(self, tmp_path):
        database = Database(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'db.sqlite'}"
        )

        assert await database.check_connection() is False
        await database.close()

    async def test_session_rolls_back_on_error(self, database):
        with pytest.raises(RuntimeError):
            async with database.get_session():
                raise RuntimeError("boom")
