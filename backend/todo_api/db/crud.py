import logging
from typing import Any, List, Mapping, Optional
from sqlmodel import Session, select
from .models import Todo, utcnow

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "completed")

def create_todo(session: Session, title: str, description: Optional[str] = None) -> Todo:
    now = utcnow()
    todo = Todo(
        title=title,
        description=description,
        completed=False,
        created_at=now,
        updated_at=now,
    )
    session.add(todo)
    session.commit()
    session.refresh(todo)
    logger.info("Created todo %s", todo.id)
    return todo

def get_todo(session: Session, todo_id: int) -> Optional[Todo]:
    todo = session.get(Todo, todo_id)
    if todo is None:
        logger.debug("Todo %s not found", todo_id)
    return todo

def list_todos(session: Session) -> List[Todo]:
    stmt = select(Todo).order_by(Todo.created_at.desc(), Todo.id.desc())
    return list(session.exec(stmt).all())

def update_todo(session: Session, todo_id: int, changes: Mapping[str, Any]) -> Optional[Todo]:
    """Merge ``changes`` over the stored row.

    Only keys present in ``changes`` are written, so an explicit ``None``
    description clears it while an absent key leaves it alone.
    """
    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

    todo = session.get(Todo, todo_id)
    if todo is None:
        logger.debug("Todo %s not found, nothing updated", todo_id)
        return None

    for field in UPDATABLE_FIELDS:
        if field in changes:
            setattr(todo, field, changes[field])
    todo.updated_at = utcnow()

    session.add(todo)
    session.commit()
    session.refresh(todo)
    logger.info("Updated todo %s (%s)", todo_id, ", ".join(changes) or "touch")
    return todo

def delete_todo(session: Session, todo_id: int) -> bool:
    todo = session.get(Todo, todo_id)
    if todo is None:
        logger.debug("Todo %s not found, nothing deleted", todo_id)
        return False
    session.delete(todo)
    session.commit()
    logger.info("Deleted todo %s", todo_id)
    return True
