from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

def utcnow() -> datetime:
    # Naive UTC, which is what SQLite hands back on read.
    return datetime.now(timezone.utc).replace(tzinfo=None)

class Todo(SQLModel, table=True):
    __tablename__ = "todos"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    description: Optional[str] = None
    completed: bool = Field(default=False, nullable=False)
    # Plain DateTime: newer sqlmodel maps datetime to a tz-aware type that rejects naive values.
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(), nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(), nullable=False)
