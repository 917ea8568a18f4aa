from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional

class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=30)
    email: EmailStr
    password: str = Field(min_length=6)

class UserOut(BaseModel):
    id: int
    username: str
    email: EmailStr
    avatar_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
