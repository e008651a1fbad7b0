from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from ...db.session import get_session
from ...db.crud import create_todo, get_todo, list_todos, update_todo, delete_todo
from ...schemas.todos import TodoCreate, TodoId, TodoUpdate, TodoOut, DeleteResult, MIN_ID, MAX_ID
from typing import List, Optional

router = APIRouter()

@router.post("/createTodo", response_model=TodoOut)
def create(body: TodoCreate, session: Session = Depends(get_session)):
    return create_todo(session, body.title, body.description)

@router.get("/getTodo", response_model=Optional[TodoOut])
def get_one(todo_id: int = Query(..., alias="id", ge=MIN_ID, le=MAX_ID), session: Session = Depends(get_session)):
    return get_todo(session, todo_id)

@router.get("/getTodos", response_model=List[TodoOut])
def list_all(session: Session = Depends(get_session)):
    return list_todos(session)

@router.post("/updateTodo", response_model=Optional[TodoOut])
def update(body: TodoUpdate, session: Session = Depends(get_session)):
    return update_todo(session, body.id, body.changes())

@router.post("/deleteTodo", response_model=DeleteResult)
def delete(body: TodoId, session: Session = Depends(get_session)):
    return DeleteResult(success=delete_todo(session, body.id))
