# /student_db/services/image_source.py

from typing import Optional, Protocol


class ImageSource(Protocol):
    """
    Where new photos come from: the platform gallery and camera pickers.

    Both calls return the path of a temporary file, or None when the user
    backed out. A cancelled pick is not an error.
    """

    async def acquire_from_gallery(self) -> Optional[str]:
        ...

    async def acquire_from_camera(self) -> Optional[str]:
        ...


class FixedImageSource:
    """An image source that hands out paths decided in advance."""

    def __init__(self, gallery_path: Optional[str] = None, camera_path: Optional[str] = None):
        self.gallery_path = gallery_path
        self.camera_path = camera_path

    async def acquire_from_gallery(self) -> Optional[str]:
        return self.gallery_path

    async def acquire_from_camera(self) -> Optional[str]:
        return self.camera_path
