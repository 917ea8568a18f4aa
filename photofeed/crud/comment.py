from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from photofeed.db.models.comment import Comment


def list_comments(db: Session, post_id: int) -> List[Comment]:
    return (
        db.query(Comment)
        .options(selectinload(Comment.author))
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )


def create_comment(db: Session, post_id: int, author_id: int, content: str) -> Comment:
    comment = Comment(post_id=post_id, author_id=author_id, content=content)
    db.add(comment)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(comment)
    return comment
