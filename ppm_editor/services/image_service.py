from pathlib import Path
from typing import Union

from ..config import Settings
from ..models.image import Image
from ..repositories.ppm_repository import PPMRepository


class ImageService:
    """I/O helpers. No filter logic here."""
    def __init__(self, settings: Settings = None):
        settings = settings or Settings.from_env()
        self.ppm_repository = PPMRepository(encoding=settings.encoding)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single P3 image from disk into an Image object."""
        return self.ppm_repository.load(path)

    def save(self, image: Image, path: Union[str, Path]) -> Path:
        """
        Business-level method to save the image to a specific path.
        """
        return self.ppm_repository.save(image, path)

    def decode(self, text: str) -> Image:
        return self.ppm_repository.decode(text)

    def encode(self, image: Image) -> str:
        return self.ppm_repository.encode(image)
