"""
Image upload handling - validation, naming and storage of submitted photos.
"""
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile as StarletteUploadFile
from app.exceptions import StorageError, UnexpectedUpload, UnsupportedUpload, UploadTooLarge
from pathlib import Path
from typing import Optional
import logging
import os
import random
import time

logger = logging.getLogger(__name__)

IMAGE_FIELD = "image"
DEFAULT_EXTENSION = ".jpg"


class ImageUploadHandler:
    """
    Stores at most one image per submission in the content directory.

    Uploads are checked against the declared MIME type (``image/*``, no
    content sniffing) and the size limit before anything touches the disk.
    """

    def __init__(self, upload_dir: Path, max_bytes: int):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes

    @staticmethod
    def single_image(form: FormData, field: str = IMAGE_FIELD) -> Optional[UploadFile]:
        """
        Pick the one file a submission may carry.

        Raises:
            UnexpectedUpload: more than one file under ``field``, or a file
                under any other field name
        """
        files = [
            (key, value) for key, value in form.multi_items()
            if isinstance(value, StarletteUploadFile) and value.filename
        ]
        if any(key != field for key, _ in files) or len(files) > 1:
            raise UnexpectedUpload()
        return files[0][1] if files else None

    def ensure_directory(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, filename: str) -> Path:
        return self.upload_dir / filename

    @staticmethod
    def generate_filename(original_name: Optional[str]) -> str:
        """
        Build ``{epoch ms}-{random 0..1e9-1}{ext}``.

        The extension comes from the original filename, ``.jpg`` if it has none.
        Collisions are unlikely but not ruled out.
        """
        ext = os.path.splitext(os.path.basename(original_name or ""))[1] or DEFAULT_EXTENSION
        stamp = int(time.time() * 1000)
        return f"{stamp}-{random.randrange(1_000_000_000)}{ext}"

    async def save(self, upload: Optional[UploadFile]) -> Optional[str]:
        """
        Validate and store an upload.

        Returns:
            The generated filename, or None when no file was sent

        Raises:
            UnsupportedUpload: declared content type is not an image
            UploadTooLarge: payload exceeds ``max_bytes``
            StorageError: the file could not be written
        """
        if upload is None or not upload.filename:
            return None

        content_type = upload.content_type or ""
        if not content_type.startswith("image/"):
            raise UnsupportedUpload()

        # One byte past the limit is enough to know it is too large
        data = await upload.read(self.max_bytes + 1)
        if len(data) > self.max_bytes:
            raise UploadTooLarge()

        filename = self.generate_filename(upload.filename)
        path = self.path_for(filename)
        try:
            await run_in_threadpool(path.write_bytes, data)
        except OSError as e:
            logger.error(f"Image write error: {e}")
            self.remove(filename)
            raise StorageError("Could not store image") from e

        logger.info(f"Stored upload {upload.filename!r} as {filename} ({len(data)} bytes)")
        return filename

    def remove(self, filename: str) -> bool:
        """
        Best-effort delete of a stored image.

        A missing file is not an error. Other filesystem errors are logged
        and swallowed. Returns True if a file was removed.
        """
        try:
            self.path_for(filename).unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Delete image error: {e}")
            return False
