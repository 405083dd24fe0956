from pydantic import BaseModel, ConfigDict
from typing import Optional

class PostOptions(BaseModel):
    model_config = ConfigDict(extra='forbid')

    backgroundColor: Optional[str] = None

class PostIn(BaseModel):
    content: str
    options: Optional[PostOptions] = None

class PostUpdate(BaseModel):
    model_config = ConfigDict(extra='forbid')

    content: Optional[str] = None
    options: Optional[PostOptions] = None
