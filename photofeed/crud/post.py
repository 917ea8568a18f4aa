import logging
from typing import List, Optional
from sqlalchemy import delete, insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from photofeed.db.models.comment import Comment
from photofeed.db.models.like import Like
from photofeed.db.models.post import Post


def list_posts(db: Session) -> List[Post]:
    # Unbounded: the feed is not paginated
    return (
        db.query(Post)
        .options(selectinload(Post.author), selectinload(Post.likes))
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )


def get_post(db: Session, post_id: int) -> Optional[Post]:
    return db.query(Post).filter(Post.id == post_id).first()


def create_post(
    db: Session,
    author_id: int,
    image_url: str,
    image_public_id: Optional[str] = None,
    description: Optional[str] = None,
) -> Post:
    new_post = Post(
        author_id=author_id,
        image_url=image_url,
        image_public_id=image_public_id,
        description=description,
    )
    db.add(new_post)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(new_post)
    return new_post


def delete_post(db: Session, post: Post):
    """Delete a post together with its comments and likes.

    All three deletes share one transaction: either everything goes or
    nothing does.
    """
    post_id = post.id
    try:
        db.execute(delete(Comment).where(Comment.post_id == post_id))
        db.execute(delete(Like).where(Like.post_id == post_id))
        db.execute(delete(Post).where(Post.id == post_id))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    logging.info(f"Post {post_id} deleted")


def is_liked(db: Session, post_id: int, user_id: int) -> bool:
    return db.query(Like.id).filter(
        Like.post_id == post_id,
        Like.user_id == user_id
    ).first() is not None


class PostNotFoundError(LookupError):
    def __init__(self, post_id: int):
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


def toggle_like(db: Session, post_id: int, user_id: int) -> bool:
    """Flip the user's like on a post; returns True if the post is now liked.

    The delete is a single conditional statement and the insert is guarded by
    the (post_id, user_id) unique constraint, so overlapping toggles by the
    same user can never produce two rows. If the insert is rejected, the
    stored state is read back: either a concurrent toggle already liked the
    post, or the post is gone and ``PostNotFoundError`` is raised.
    """
    try:
        removed = db.execute(
            delete(Like).where(Like.post_id == post_id, Like.user_id == user_id)
        ).rowcount
        if removed:
            db.commit()
            return False

        db.execute(insert(Like).values(post_id=post_id, user_id=user_id))
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if get_post(db, post_id) is None:
            logging.warning(f"Post {post_id} deleted while user {user_id} was liking it")
            raise PostNotFoundError(post_id) from e
        logging.warning(f"Concurrent like on post {post_id} by user {user_id}")
        return is_liked(db, post_id, user_id)
    except SQLAlchemyError:
        db.rollback()
        raise
    return True
