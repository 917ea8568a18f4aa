from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from photofeed.db.session import get_db
from photofeed.schemas.post import LikeToggleOut, PostOut
from photofeed.crud import post as crud
from photofeed.core.security import get_current_user

router = APIRouter()

@router.post("/{post_id}/like", response_model=LikeToggleOut)
def toggle_like(
    post_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user)
):
    post = crud.get_post(db, post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")

    try:
        liked = crud.toggle_like(db, post_id, current_user.id)
    except crud.PostNotFoundError:
        # deleted between the lookup and the insert
        raise HTTPException(status_code=404, detail="Post not found")
    db.refresh(post)

    return {
        "message": "Post liked" if liked else "Like removed",
        "liked": liked,
        "post": PostOut.model_validate(post),
    }
