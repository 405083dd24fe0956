from pydantic import BaseModel, ConfigDict
from typing import Optional

class StatusIn(BaseModel):
    content: str

class StatusUpdate(BaseModel):
    model_config = ConfigDict(extra='forbid')

    content: Optional[str] = None
