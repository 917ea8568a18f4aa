from sqlalchemy import Column, Integer, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from photofeed.db.base import Base
from sqlalchemy.orm import relationship

class Like(Base):
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # one like per (post, user)
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_likes_post_user"),)

    user = relationship("User", back_populates="likes")
    post = relationship("Post", back_populates="likes")
