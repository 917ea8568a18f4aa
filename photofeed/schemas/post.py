from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional

class AuthorOut(BaseModel):
    id: int
    username: str
    avatar_url: Optional[str] = None

    class Config:
        from_attributes = True

class LikeOut(BaseModel):
    user_id: int

    class Config:
        from_attributes = True

class PostOut(BaseModel):
    id: int
    image_url: str
    description: Optional[str] = None
    created_at: datetime
    author_id: int
    author: AuthorOut
    likes: List[LikeOut] = []
    likes_count: int = 0
    comments_count: int = 0

    class Config:
        from_attributes = True

class LikeToggleOut(BaseModel):
    message: str
    liked: bool
    post: PostOut

class PostDeleteOut(BaseModel):
    success: bool
    msg: str
