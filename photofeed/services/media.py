import logging
import time
import cloudinary
from cloudinary import uploader
from cloudinary.exceptions import Error as CloudinaryError
from fastapi import HTTPException, UploadFile, status
from photofeed.core import config

cloudinary.config(
    cloud_name=config.CLOUDINARY_CLOUD_NAME,
    api_key=config.CLOUDINARY_API_KEY,
    api_secret=config.CLOUDINARY_API_SECRET,
    secure=True
)


async def read_image(image: UploadFile) -> bytes:
    """Read an uploaded image, rejecting unsupported types and oversized files."""
    if not image.filename:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "No file provided")
    if image.content_type not in config.ALLOWED_IMAGE_TYPES:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Invalid image format")

    data = await image.read()
    if not data:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Image is empty")
    if len(data) > config.MAX_IMAGE_SIZE:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            f"File too large (max {config.MAX_IMAGE_SIZE // (1024 * 1024)}MB)"
        )
    return data


def upload_image(data: bytes, folder: str, owner_id: int) -> dict:
    """Upload image bytes to Cloudinary; returns ``{"url", "public_id"}``."""
    prefix = "post" if folder == config.POST_IMAGE_FOLDER else "user"
    try:
        upload_result = uploader.upload(
            data,
            folder=folder,
            public_id=f"{prefix}_{owner_id}_{int(time.time() * 1000)}",
            resource_type="image",
            overwrite=True,
            quality="auto:good"
        )
    except CloudinaryError as e:
        logging.error(f"Cloudinary Error: {str(e)}")
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Image upload failed")

    return {
        "url": upload_result["secure_url"],
        "public_id": upload_result["public_id"],
    }


def destroy_image(public_id: str | None):
    # failures are logged, never raised
    if not public_id:
        return
    try:
        uploader.destroy(public_id)
    except CloudinaryError as e:
        logging.error(f"Cloudinary cleanup error: {str(e)}")
