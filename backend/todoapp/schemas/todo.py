from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class TodoCreate(BaseModel):
    title: Optional[str] = None

class TodoUpdate(BaseModel):
    # Only keys present in the request body are applied (see model_fields_set).
    title: Optional[str] = None
    completed: Any = None

class TodoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    completed: bool
    user_id: int = Field(serialization_alias="userId")
