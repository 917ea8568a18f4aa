from fastapi import APIRouter, Depends, HTTPException, status, File, UploadFile
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from photofeed.core import config
from photofeed.crud import user as crud
from photofeed.db.models.user import User
from photofeed.schemas.user import UserOut
from photofeed.db.session import get_db
from photofeed.core.security import get_current_user
from photofeed.services import media


router = APIRouter()


# Get user details
@router.get("/me", response_model=UserOut)
def get_user_me(current_user: User = Depends(get_current_user)):
    return current_user


#update user avatar
@router.put("/avatar", response_model=UserOut)
async def update_avatar(
    avatar: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    data = await media.read_image(avatar)
    uploaded = media.upload_image(data, config.AVATAR_FOLDER, current_user.id)

    try:
        old_public_id = crud.set_avatar(db, current_user, uploaded["url"], uploaded["public_id"])
    except SQLAlchemyError as e:
        logging.error(f"Database error: {str(e)}")
        media.destroy_image(uploaded["public_id"])
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save profile picture"
        )

    # Delete old image after successful update
    media.destroy_image(old_public_id)
    return current_user
