from pydantic import BaseModel
from typing import Optional

class LoginIn(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class UserOut(BaseModel):
    id: int
    username: str

class TokenOut(BaseModel):
    token: str
    user: UserOut

class MessageOut(BaseModel):
    message: str
