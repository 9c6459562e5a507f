"""
Shared fixtures.

`fake_db` swaps the asyncpg pool for a scripted stand-in: each query pops the
next queued result (a row dict, a list of rows, None, or an exception to
raise) and is recorded in `fake_db.calls` with whitespace collapsed.
"""

import pytest
from fastapi.testclient import TestClient

import main
from auth import dependencies as auth_dependencies
from core import db

ADMIN_USER = {"id": 1, "username": "admin", "is_admin": True}
PLAIN_USER = {"id": 2, "username": "worker", "is_admin": False}


class _Transaction:
    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class _Acquired:
    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, *exc_info):
        return False


class FakeDB:
    def __init__(self):
        self.calls = []
        self.transactions = []
        self._results = []

    def queue(self, *results):
        self._results.extend(results)

    @property
    def statements(self):
        return [sql for sql, _ in self.calls]

    def _next(self, sql, args):
        self.calls.append((" ".join(sql.split()), args))
        if not self._results:
            raise AssertionError(f"unexpected query: {sql}")
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def fetchrow(self, sql, *args):
        return self._next(sql, args)

    async def fetch(self, sql, *args):
        return self._next(sql, args)

    async def execute(self, sql, *args):
        return self._next(sql, args)

    def acquire(self):
        return _Acquired(self)

    def transaction(self, **kwargs):
        self.transactions.append(kwargs)
        return _Transaction()


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_db(monkeypatch):
    fake = FakeDB()
    monkeypatch.setattr(db, "_pool", fake)
    return fake


@pytest.fixture
def client(fake_db):
    main.app.dependency_overrides[auth_dependencies.get_current_user] = lambda: dict(ADMIN_USER)
    try:
        yield TestClient(main.app)
    finally:
        main.app.dependency_overrides.clear()


@pytest.fixture
def plain_client(fake_db):
    main.app.dependency_overrides[auth_dependencies.get_current_user] = lambda: dict(PLAIN_USER)
    try:
        yield TestClient(main.app)
    finally:
        main.app.dependency_overrides.clear()


@pytest.fixture
def anon_client(fake_db):
    return TestClient(main.app)
