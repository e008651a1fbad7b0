# frontend/todo_ui/client.py
from __future__ import annotations

import os
from typing import Any, List, Optional

import requests

from .models import TodoItem

API = os.getenv("API_URL", "http://localhost:8000/api/v1")


class TodoClient:
    """
    Thin caller for the todo procedures.

    ``session`` can be anything with requests-style ``get``/``post``
    (a ``requests.Session`` in production, a FastAPI ``TestClient`` in tests).
    Non-2xx responses raise through ``raise_for_status()``.
    """

    def __init__(self, api_url: str = API, session: Any = None, timeout: Optional[float] = 10.0) -> None:
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _kwargs(self) -> dict:
        return {"timeout": self.timeout} if self.timeout is not None else {}

    def _get(self, procedure: str, params: Optional[dict] = None) -> Any:
        r = self.session.get(f"{self.api_url}/{procedure}", params=params, **self._kwargs())
        r.raise_for_status()
        return r.json()

    def _post(self, procedure: str, payload: dict) -> Any:
        r = self.session.post(f"{self.api_url}/{procedure}", json=payload, **self._kwargs())
        r.raise_for_status()
        return r.json()

    def create_todo(self, title: str, description: Optional[str] = None) -> TodoItem:
        data = self._post("createTodo", {"title": title, "description": description})
        return TodoItem.model_validate(data)

    def get_todo(self, todo_id: int) -> Optional[TodoItem]:
        data = self._get("getTodo", {"id": todo_id})
        return TodoItem.model_validate(data) if data is not None else None

    def get_todos(self) -> List[TodoItem]:
        return [TodoItem.model_validate(d) for d in self._get("getTodos")]

    def update_todo(self, todo_id: int, **changes: Any) -> Optional[TodoItem]:
        # Only the keyword arguments actually passed go over the wire.
        data = self._post("updateTodo", {"id": todo_id, **changes})
        return TodoItem.model_validate(data) if data is not None else None

    def delete_todo(self, todo_id: int) -> bool:
        return bool(self._post("deleteTodo", {"id": todo_id})["success"])
