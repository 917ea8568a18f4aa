from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from sqlalchemy.orm import Session
from photofeed.db.session import get_db
from photofeed.schemas.comment import CommentCreate, CommentOut
from photofeed.crud import comment as crud
from photofeed.crud.post import get_post
from photofeed.core.security import get_current_user

router = APIRouter()


def _ensure_post(db: Session, post_id: int):
    if not get_post(db, post_id):
        raise HTTPException(status_code=404, detail="Post not found")


@router.post("/{post_id}/comments", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
def create_comment(
    post_id: int,
    comment_in: CommentCreate,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user)
):
    _ensure_post(db, post_id)
    return crud.create_comment(db, post_id, current_user.id, comment_in.content)


@router.get("/{post_id}/comments", response_model=List[CommentOut])
def get_comments(post_id: int, db: Session = Depends(get_db)):
    _ensure_post(db, post_id)
    return crud.list_comments(db, post_id)
