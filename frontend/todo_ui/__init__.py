from .client import TodoClient
from .models import TodoItem
from .state import TodoListState

__all__ = ["TodoClient", "TodoItem", "TodoListState"]
