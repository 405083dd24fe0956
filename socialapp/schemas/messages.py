from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union

class MessageIn(BaseModel):
    recipient_usernames: Union[str, List[str]]
    content: str

class MessageUpdate(BaseModel):
    model_config = ConfigDict(extra='forbid')

    content: Optional[str] = None
