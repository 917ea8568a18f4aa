from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form
from typing import List, Optional
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from photofeed.core import config
from photofeed.db.models.user import User
from photofeed.db.session import get_db
from photofeed.schemas.post import PostOut, PostDeleteOut
from photofeed.crud import post as crud
from photofeed.core.security import get_current_user
from photofeed.services import media

router = APIRouter()


def _get_post_or_404(db: Session, post_id: int):
    post = crud.get_post(db, post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.get("", response_model=List[PostOut])
def get_posts(db: Session = Depends(get_db)):
    return crud.list_posts(db)


@router.post("", response_model=PostOut, status_code=status.HTTP_201_CREATED)
async def create_post(
    image: Optional[UploadFile] = File(None),
    description: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if image is None:
        raise HTTPException(status_code=400, detail="Image is required")

    data = await media.read_image(image)
    uploaded = media.upload_image(data, config.POST_IMAGE_FOLDER, current_user.id)

    description = description.strip() if description else None
    try:
        return crud.create_post(
            db,
            author_id=current_user.id,
            image_url=uploaded["url"],
            image_public_id=uploaded["public_id"],
            description=description or None,
        )
    except SQLAlchemyError as e:
        logging.error(f"Database error: {str(e)}")
        # Cleanup uploaded image if database operation failed
        media.destroy_image(uploaded["public_id"])
        raise HTTPException(500, "Failed to create post")


@router.get("/{post_id}", response_model=PostOut)
def get_post_by_id(post_id: int, db: Session = Depends(get_db)):
    return _get_post_or_404(db, post_id)


#delete post
@router.delete("/{post_id}", response_model=PostDeleteOut)
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    post = _get_post_or_404(db, post_id)
    if post.author_id != current_user.id:
        raise HTTPException(status_code=403, detail="Not authorized to delete this post")

    image_public_id = post.image_public_id
    logging.info(f"Deleting post {post_id} by user {current_user.id}")
    try:
        crud.delete_post(db, post)
    except SQLAlchemyError as e:
        logging.error(f"Database error: {str(e)}")
        raise HTTPException(500, "Failed to delete post")

    media.destroy_image(image_public_id)
    return {"success": True, "msg": "Post deleted successfully"}
