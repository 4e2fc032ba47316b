# /student_db/services/asset_store.py

"""
Durable storage for student photos.

A picked or captured photo arrives as a temporary file. `persist` re-encodes
it into the photo directory under a name that is unique per write, so two
records never share a file and no file is ever rewritten in place.
"""

import os
import time
import uuid
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from .. import config
from ..utils.logging import get_logger
from .faults import AssetFault

logger = get_logger("assets")


class AssetStore:
    def __init__(self, photo_dir: Union[str, Path, None] = None, *, jpeg_quality: Optional[int] = None):
        self.photo_dir = Path(photo_dir or config.PHOTO_DIR)
        self.jpeg_quality = jpeg_quality or config.PHOTO_JPEG_QUALITY

    def _new_path(self) -> Path:
        millis = int(time.time() * 1000)
        return self.photo_dir / f"student_{millis}_{uuid.uuid4().hex[:8]}.jpg"

    def persist(self, temp_path: Union[str, Path]) -> str:
        """
        Copies the photo at `temp_path` into the photo directory as a JPEG and
        returns the stable path. Raises `AssetFault` when the source is
        missing, is not an image, or cannot be written.
        """
        source = Path(temp_path)
        if not source.is_file():
            raise AssetFault(f"The selected photo could not be found: {source}")

        target = self._new_path()
        try:
            with Image.open(source) as img:
                img.load()
                photo = img.convert("RGB")
            self.photo_dir.mkdir(parents=True, exist_ok=True)
            photo.save(target, format="JPEG", quality=self.jpeg_quality)
        except (UnidentifiedImageError, Image.DecompressionBombError) as e:
            raise AssetFault(f"The selected file is not a usable photo: {source.name}") from e
        except OSError as e:
            # A half-written file must not be left behind as a valid-looking asset.
            if target.exists():
                target.unlink()
            raise AssetFault(f"Could not save the photo: {e}") from e

        logger.info("Stored photo %s", target)
        return str(target)

    def resolve(self, path: Optional[str]) -> Optional[str]:
        """The path if the photo is still there, otherwise None (show a placeholder)."""
        if path and os.path.isfile(path):
            return path
        return None
