# frontend/todo_ui/state.py
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar

from .models import TodoItem

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TodoListState:
    """
    Local mirror of the stored todo list.

    The server is the source of truth. The list here is only changed after a
    remote call succeeds; a failed call is logged, kept in ``error`` and
    leaves ``todos`` untouched. Nothing is retried.
    """

    def __init__(self, client: Any) -> None:
        self.client = client
        self.todos: List[TodoItem] = []
        self.error: Optional[str] = None

    # --- counters ---

    @property
    def total_count(self) -> int:
        return len(self.todos)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self.todos if t.completed)

    @property
    def remaining_count(self) -> int:
        return self.total_count - self.completed_count

    # --- remote calls ---

    def _call(self, action: str, fn: Callable[[], T]) -> tuple[bool, Optional[T]]:
        try:
            result = fn()
        except Exception as e:
            logger.exception("Failed to %s", action)
            self.error = f"Failed to {action}: {e}"
            return False, None
        self.error = None
        return True, result

    def _replace(self, updated: TodoItem) -> None:
        self.todos = [updated if t.id == updated.id else t for t in self.todos]

    def reload(self) -> bool:
        ok, todos = self._call("load todos", self.client.get_todos)
        if ok:
            self.todos = list(todos or [])
        return ok

    def create(self, title: str, description: Optional[str] = None) -> bool:
        ok, created = self._call("create todo", lambda: self.client.create_todo(title, description or None))
        if ok and created is not None:
            self.todos = [created, *self.todos]
        return ok

    def toggle(self, todo: TodoItem) -> bool:
        ok, updated = self._call(
            "update todo", lambda: self.client.update_todo(todo.id, completed=not todo.completed)
        )
        if ok and updated is not None:
            self._replace(updated)
        return ok

    def edit(self, todo_id: int, title: str, description: Optional[str]) -> bool:
        ok, updated = self._call(
            "update todo",
            lambda: self.client.update_todo(todo_id, title=title, description=description or None),
        )
        if ok and updated is not None:
            self._replace(updated)
        return ok

    def delete(self, todo_id: int) -> bool:
        ok, removed = self._call("delete todo", lambda: self.client.delete_todo(todo_id))
        if ok and removed:
            self.todos = [t for t in self.todos if t.id != todo_id]
        return ok
