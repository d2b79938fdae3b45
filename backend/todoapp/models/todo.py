from sqlmodel import SQLModel


class Todo(SQLModel):
    id: int
    user_id: int

    title: str
    completed: bool = False
