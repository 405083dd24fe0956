from pydantic import BaseModel, ConfigDict
from typing import Optional

class RegisterIn(BaseModel):
    username: str
    password: str

class LoginIn(BaseModel):
    username: str
    password: str

class UserUpdate(BaseModel):
    model_config = ConfigDict(extra='forbid')

    username: Optional[str] = None
    password: Optional[str] = None

class ActionOkOut(BaseModel):
    msg: str
