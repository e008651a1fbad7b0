# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from todo_api.db.session import build_engine, get_session, init_db
from todo_api.main import app


@pytest.fixture()
def restore_root_logging():
    """Undo setup_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def engine(tmp_path: Path):
    """Fresh SQLite Task Store per test."""
    eng = build_engine(f"sqlite:///{tmp_path / 'todos.sqlite3'}")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session(engine) -> Iterator[Session]:
    with Session(engine) as s:
        yield s


@pytest.fixture()
def client(engine) -> Iterator[TestClient]:
    """
    TestClient wired to the per-test store.

    Used without a ``with`` block so the startup hook (which targets the
    configured DATABASE_URL) does not run.
    """

    def _session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
