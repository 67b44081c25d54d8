"""
Board Backend — Image Storage Service
======================================

What:  Stores uploaded images and serves them back by name.
How:   Writes bytes into a flat upload directory under a generated name
       `<uuid4>_<original filename>`, read back with async file I/O.
Who:   Called by the images route handlers.

Directory Structure:
    uploads/
    ├── 3f0c2a9e-7d4b-4a55-9a51-0b8e2f6f1c11_cat.png
    └── 8d1e44b2-0c0e-41c7-b2f5-0f5a3b9cd2a7_holiday.jpg

Naming:
    The UUID prefix keeps names unique under concurrent uploads; the original
    name is kept after the separator so the file stays recognizable. Only the
    basename of the client-supplied name is used, so a name such as
    "../../etc/passwd" is stored as "<uuid>_passwd".

Content type:
    Every image is served as image/jpeg regardless of its real format.
    Clients rely on that header today; switching to detected types is a
    separate change.
"""

import logging
import uuid
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Optional

import aiofiles

from board.config import settings
from board.exceptions import FileStorageError, NotFoundError

logger = logging.getLogger(__name__)

IMAGE_URL_PREFIX = "/api/images/"
IMAGE_MEDIA_TYPE = "image/jpeg"
FILENAME_SEPARATOR = "_"
DEFAULT_UPLOAD_NAME = "upload"


class ImageService:
    """
    Manages the upload directory.

    Lifecycle of an uploaded file:
        1. Client sends multipart upload → ImageService.upload()
        2. A unique name is generated from the original filename
        3. Bytes are written to <upload_dir>/<name>
        4. The retrieval path /api/images/<name> is returned
        5. GET /api/images/<name> → ImageService.retrieve() returns the bytes
    """

    def __init__(self, upload_dir: Optional[str] = None):
        """
        Args:
            upload_dir: Override the configured directory (used in tests).
        """
        self.upload_dir = Path(upload_dir or settings.upload_dir).resolve()
        self.ensure_upload_dir()
        logger.info("ImageService initialized with upload_dir=%s", self.upload_dir)

    def ensure_upload_dir(self) -> Path:
        """Create the upload directory if it is missing. Idempotent."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    def generate_filename(self, original_filename: Optional[str]) -> str:
        """Prefix the basename of `original_filename` with a fresh UUID4."""
        # Browsers on Windows may send full paths with backslashes
        basename = PureWindowsPath(PurePosixPath(original_filename or "").name).name
        return f"{uuid.uuid4()}{FILENAME_SEPARATOR}{basename or DEFAULT_UPLOAD_NAME}"

    async def upload(self, content: bytes, original_filename: Optional[str]) -> str:
        """
        Store an uploaded image and return its retrieval path.

        Returns:
            "/api/images/<generated-filename>"

        Raises:
            FileStorageError: the directory or file could not be written
        """
        filename = self.generate_filename(original_filename)
        path = self.upload_dir / filename

        try:
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store image at %s: %s", path, str(e))
            raise FileStorageError(
                message="Failed to save uploaded image",
                context={"path": str(path), "os_error": str(e)},
            )

        logger.info("Image stored: %s (%d bytes)", filename, len(content))
        return f"{IMAGE_URL_PREFIX}{filename}"

    def resolve(self, filename: str) -> Optional[Path]:
        """
        Path of a stored image, or None when no such regular file exists.

        Names that resolve outside the upload directory, or that the OS
        rejects (e.g. embedded NUL bytes), never match.
        """
        try:
            path = (self.upload_dir / filename).resolve()
            if path.parent != self.upload_dir or not path.is_file():
                return None
        except (OSError, ValueError) as e:
            logger.warning("Rejected image name %r: %s", filename, str(e))
            return None
        return path

    async def retrieve(self, filename: str) -> bytes:
        """
        Read a stored image.

        Raises:
            NotFoundError: no readable file with this exact name
        """
        path = self.resolve(filename)
        if path is None:
            logger.warning("Image %s not found", filename)
            raise NotFoundError(resource="Image", resource_id=filename)

        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except OSError as e:
            logger.warning("Image %s unreadable: %s", filename, str(e))
            raise NotFoundError(resource="Image", resource_id=filename)


# ── Singleton Instance ────────────────────────────────────────────────────
image_service = ImageService()
