from pydantic import BaseModel, field_validator
from datetime import datetime
from photofeed.schemas.post import AuthorOut

class CommentCreate(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Comment cannot be empty")
        return value

class CommentOut(BaseModel):
    id: int
    post_id: int
    author_id: int
    content: str
    created_at: datetime
    author: AuthorOut

    class Config:
        from_attributes = True
