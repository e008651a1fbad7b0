from datetime import datetime
from typing import Annotated, Optional
from pydantic import BaseModel, Field, StrictBool, StrictInt, model_validator

# SQLite INTEGER is a signed 64-bit value.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

TodoIdValue = Annotated[StrictInt, Field(ge=MIN_ID, le=MAX_ID)]

class TodoCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None

class TodoId(BaseModel):
    id: TodoIdValue

class TodoUpdate(BaseModel):
    id: TodoIdValue
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    completed: Optional[StrictBool] = None

    @model_validator(mode="after")
    def _reject_null_required(self):
        # description may be sent as null to clear it; title and completed may not.
        for name in ("title", "completed"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} may be omitted but not null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"id"})

class TodoOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    completed: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class DeleteResult(BaseModel):
    success: bool
