import logging
import shutil
from pathlib import Path, PureWindowsPath
from typing import Union

from fastapi import UploadFile

from .config import SUNSHINE_IMAGE_DIR
from .exceptions import StoreIOError, ValidationError

logger = logging.getLogger(__name__)


class ImageStore:
    """Moves uploaded box art into Sunshine's image directory."""

    def __init__(self, directory: Union[str, Path] = SUNSHINE_IMAGE_DIR):
        self.directory = Path(directory)

    def save(self, upload: UploadFile) -> str:
        # Browsers on Windows may send a full client-side path.
        filename = PureWindowsPath(upload.filename or "").name
        if filename in ("", ".", ".."):
            raise ValidationError("Uploaded image has no usable filename")

        dest_path = self.directory / filename
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with dest_path.open("wb") as dest:
                shutil.copyfileobj(upload.file, dest)
        except OSError as e:
            logger.error(f"Failed to store image {filename} in {self.directory}: {e}")
            raise StoreIOError(f"Error saving image: {e}") from e

        logger.info(f"Stored image {dest_path}")
        return str(dest_path)


# Global image store instance
image_store = ImageStore()
