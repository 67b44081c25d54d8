"""
Board Backend — Image Route Handlers
=====================================

What:  Upload and serve images under /api/images.
Who:   Called by the frontend upload widget and by <img> tags pointing at
       the returned retrieval path.

Request Flow (upload):
    1. Client sends multipart/form-data with a 'file' field
    2. Content is read into memory
    3. ImageService stores it and returns /api/images/<generated-name>
    4. That path is returned as a plain-text body
"""

import logging

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import PlainTextResponse, Response

from board.schemas.post import ErrorResponse
from board.services.image_service import IMAGE_MEDIA_TYPE, image_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/images", tags=["Images"])


@router.post(
    "/upload",
    response_class=PlainTextResponse,
    responses={500: {"description": "Image could not be written", "model": ErrorResponse}},
    summary="Upload an image",
    description="Stores the file and returns the path it can be fetched from.",
)
async def upload_image(file: UploadFile = File(..., description="Image file")) -> str:
    content = await file.read()
    logger.info(
        "Received image upload: filename=%s, size=%d bytes",
        file.filename or "unknown",
        len(content),
    )
    try:
        return await image_service.upload(content, file.filename)
    finally:
        await file.close()


@router.get(
    "/{file_name}",
    response_class=Response,
    responses={
        200: {"content": {IMAGE_MEDIA_TYPE: {}}, "description": "Image bytes"},
        404: {"description": "Image not found", "model": ErrorResponse},
    },
    summary="Serve an uploaded image",
)
async def get_image(file_name: str) -> Response:
    content = await image_service.retrieve(file_name)
    return Response(content=content, media_type=IMAGE_MEDIA_TYPE)
