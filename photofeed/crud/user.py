from typing import Optional
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from photofeed.core.security import hash_password
from photofeed.db.models.user import User


def get_user_by_login(db: Session, login: str) -> Optional[User]:
    # login may be either the username or the email
    return db.query(User).filter(or_(User.username == login, User.email == login)).first()


def username_or_email_taken(db: Session, username: str, email: str) -> bool:
    return db.query(User.id).filter(
        or_(User.username == username, User.email == email)
    ).first() is not None


def create_user(db: Session, username: str, email: str, password: str) -> User:
    new_user = User(
        username=username,
        email=email,
        password=hash_password(password),
    )
    db.add(new_user)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(new_user)
    return new_user


def set_avatar(db: Session, user: User, avatar_url: str, avatar_public_id: Optional[str]) -> Optional[str]:
    """Point the user at a new avatar; returns the previous image's public id."""
    old_public_id = user.avatar_public_id
    user.avatar_url = avatar_url
    user.avatar_public_id = avatar_public_id
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(user)
    return old_public_id
