# tests/test_crud.py

from __future__ import annotations

import time

import pytest
from sqlmodel import Session, select

from todo_api.db import crud
from todo_api.db.models import Todo

COLUMNS = ("id", "title", "description", "completed", "created_at", "updated_at")


def fields(todo: Todo) -> dict:
    # attribute access reloads rows expired by a later commit
    return {c: getattr(todo, c) for c in COLUMNS}


def test_create_sets_defaults(session: Session) -> None:
    todo = crud.create_todo(session, "Buy milk")

    assert todo.id is not None
    assert todo.title == "Buy milk"
    assert todo.description is None
    assert todo.completed is False
    assert todo.created_at == todo.updated_at


def test_create_keeps_description_and_assigns_fresh_ids(session: Session) -> None:
    a = crud.create_todo(session, "A", "first")
    b = crud.create_todo(session, "B", "")

    assert a.id != b.id
    assert a.description == "first"
    # empty string is a value, not "no description"
    assert b.description == ""


def test_get_returns_stored_row(session: Session, engine) -> None:
    created = crud.create_todo(session, "Read book", "chapter 3")

    with Session(engine) as other:
        fetched = crud.get_todo(other, created.id)
        assert fetched is not None
        assert fields(fetched) == fields(created)


def test_get_missing_returns_none(session: Session) -> None:
    assert crud.get_todo(session, 99999) is None


def test_list_empty(session: Session) -> None:
    assert crud.list_todos(session) == []


def test_list_newest_first(session: Session) -> None:
    for title in ("First Todo", "Second Todo", "Third Todo"):
        crud.create_todo(session, title)
        time.sleep(0.01)

    todos = crud.list_todos(session)
    assert [t.title for t in todos] == ["Third Todo", "Second Todo", "First Todo"]
    assert todos[0].created_at >= todos[1].created_at >= todos[2].created_at


def test_update_title_only(session: Session) -> None:
    todo = crud.create_todo(session, "Test Todo", "A test todo item")
    before = fields(todo)
    time.sleep(0.01)

    updated = crud.update_todo(session, todo.id, {"title": "Updated Title"})
    assert updated is not None
    assert updated.title == "Updated Title"
    assert updated.description == before["description"]
    assert updated.completed is False
    assert updated.created_at == before["created_at"]
    assert updated.updated_at > before["updated_at"]


def test_update_completed_only(session: Session) -> None:
    todo = crud.create_todo(session, "Test Todo", "A test todo item")

    updated = crud.update_todo(session, todo.id, {"completed": True})
    assert updated is not None
    assert updated.completed is True
    assert updated.title == "Test Todo"
    assert updated.description == "A test todo item"


def test_update_false_is_an_explicit_value(session: Session) -> None:
    todo = crud.create_todo(session, "Test Todo")
    crud.update_todo(session, todo.id, {"completed": True})

    updated = crud.update_todo(session, todo.id, {"completed": False})
    assert updated is not None
    assert updated.completed is False


def test_update_null_description_clears_it(session: Session) -> None:
    todo = crud.create_todo(session, "Test Todo", "A test todo item")

    updated = crud.update_todo(session, todo.id, {"description": None})
    assert updated is not None
    assert updated.description is None
    assert updated.title == "Test Todo"


def test_update_with_no_fields_refreshes_updated_at(session: Session) -> None:
    todo = crud.create_todo(session, "Test Todo", "keep")
    stamp = todo.updated_at
    time.sleep(0.01)

    updated = crud.update_todo(session, todo.id, {})
    assert updated is not None
    assert updated.description == "keep"
    assert updated.updated_at > stamp


def test_update_missing_has_no_side_effects(session: Session) -> None:
    other = crud.create_todo(session, "Other")
    before = fields(other)

    assert crud.update_todo(session, 99999, {"title": "Non-existent"}) is None

    rows = session.exec(select(Todo)).all()
    assert len(rows) == 1
    assert fields(rows[0]) == before


def test_update_rejects_unknown_fields(session: Session) -> None:
    todo = crud.create_todo(session, "Test Todo")
    with pytest.raises(ValueError):
        crud.update_todo(session, todo.id, {"created_at": None})


def test_delete_removes_only_target(session: Session) -> None:
    keep1 = crud.create_todo(session, "Keep 1", "one")
    gone = crud.create_todo(session, "Delete me")
    keep2 = crud.create_todo(session, "Keep 2")
    crud.update_todo(session, keep2.id, {"completed": True})
    snapshot = {t.id: fields(t) for t in (keep1, keep2)}

    assert crud.delete_todo(session, gone.id) is True
    assert crud.get_todo(session, gone.id) is None

    remaining = {t.id: fields(t) for t in crud.list_todos(session)}
    assert remaining == snapshot


def test_delete_missing_returns_false(session: Session) -> None:
    crud.create_todo(session, "Stay")
    assert crud.delete_todo(session, 99999) is False
    assert len(crud.list_todos(session)) == 1


def test_buy_milk_scenario(session: Session) -> None:
    todo = crud.create_todo(session, "Buy milk")
    assert (todo.title, todo.description, todo.completed) == ("Buy milk", None, False)

    done = crud.update_todo(session, todo.id, {"completed": True})
    assert done is not None
    assert done.completed is True
    assert done.title == "Buy milk"

    assert crud.delete_todo(session, todo.id) is True
    assert crud.get_todo(session, todo.id) is None


def test_timestamps_round_trip_as_naive_utc(session: Session, engine) -> None:
    todo = crud.create_todo(session, "Stamp")

    with Session(engine) as other:
        stored = crud.get_todo(other, todo.id)
        assert stored is not None
        assert stored.created_at.tzinfo is None
        assert stored.created_at == stored.updated_at
