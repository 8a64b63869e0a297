"""Shared fixtures for the Player service tests.

Each test gets its own SQLite database file with a `Player` table shaped like
the production one. The app talks to it through `sqlite+aiosqlite`; tests
inspect it directly through a synchronous engine (`store`).
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.ext.asyncio import create_async_engine

from monopoly_api.main import create_app
from monopoly_api.settings import Settings

PLAYER_DDL = """
    CREATE TABLE Player (
      id INTEGER PRIMARY KEY,
      email TEXT NOT NULL,
      name TEXT
    )
"""


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "monopoly.db"


@pytest.fixture()
def store(db_path) -> Iterator[Engine]:
    engine = create_engine(f"sqlite:///{db_path}")
    with engine.begin() as conn:
        conn.execute(text(PLAYER_DDL))
    yield engine
    engine.dispose()


@pytest.fixture()
def client(store, db_path) -> Iterator[TestClient]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    app = create_app(settings=Settings(_env_file=None), engine=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def count_players(store):
    def _count() -> int:
        with store.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM Player")).scalar_one()

    return _count
