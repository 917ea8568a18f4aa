from pydantic import BaseModel
from typing import Optional

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    username: str


class TokenData(BaseModel):
    user_id: Optional[int] = None
