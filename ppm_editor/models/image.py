from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import numpy as np

from .color import Color
from .errors import OutOfBounds

PIXEL_DTYPE = np.int64


@dataclass(eq=False)
class Image:
    """
    Simple data object: RGB pixels (+ optional source path for bookkeeping).

    Pixels live in an array of shape (H, W, 3), indexed [y, x, channel].
    The shape is fixed at construction, so width and height are known
    even when one of them is zero.
    """
    pixels: np.ndarray # Shape (H, W, 3), signed ints, RGB order.
    path: Path | None = field(default=None) # Source of the image.

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(f"Expected pixels of shape (H, W, 3), got {self.pixels.shape}")

    @classmethod
    def blank(cls, width: int, height: int, path: Path | None = None) -> Image:
        """Create a width x height image with every pixel set to (0, 0, 0)."""
        if width < 0 or height < 0:
            raise ValueError(f"Image dimensions must be non-negative, got {width}x{height}")
        return cls(pixels=np.zeros((height, width, 3), dtype=PIXEL_DTYPE), path=path)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def _check_bounds(self, x: int, y: int) -> None:
        # Negative indices would silently wrap around in numpy.
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(x, y)

    def get(self, x: int, y: int) -> Color:
        """Return a copy of the pixel at (x, y)."""
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x].tolist()
        return Color(r, g, b)

    def set(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self.pixels[y, x] = color.as_tuple()

    def copy(self) -> Image:
        return Image(pixels=self.pixels.copy(), path=self.path)

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)
