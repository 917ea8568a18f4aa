from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, select, func
from sqlalchemy.orm import relationship, column_property
from datetime import datetime
from photofeed.db.base import Base
from photofeed.db.models.comment import Comment
from photofeed.db.models.like import Like

class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    image_url = Column(String, nullable=False)
    image_public_id = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    likes_count = column_property(
        select(func.count(Like.id)).where(Like.post_id == id).correlate_except(Like).scalar_subquery()
    )
    comments_count = column_property(
        select(func.count(Comment.id)).where(Comment.post_id == id).correlate_except(Comment).scalar_subquery()
    )

    author = relationship("User", back_populates="posts")
    likes = relationship("Like", back_populates="post", cascade="all, delete-orphan")
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan")
