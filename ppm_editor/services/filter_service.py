from __future__ import annotations

import logging

import numpy as np

from ..models.image import Image
from ..models.image_filter import Emboss, Grayscale, ImageFilter, Invert, MotionBlur

logger = logging.getLogger(__name__)

MAX_CHANNEL = 255
EMBOSS_BASE = 128


class FilterService:
    """
    In-place pixel filters.
    *   No I/O here, works only with Image objects.
    *   Every filter mutates ``image.pixels`` and returns None.
    """

    # ─── Public API ────────────────────────────────────────────────
    def apply(self, image: Image, image_filter: ImageFilter) -> None:
        """Run one filter variant on the image."""
        logger.info(f"Applying {image_filter} to {image.width}x{image.height} image")
        if isinstance(image_filter, Grayscale):
            self.grayscale(image)
        elif isinstance(image_filter, Invert):
            self.invert(image)
        elif isinstance(image_filter, Emboss):
            self.emboss(image)
        elif isinstance(image_filter, MotionBlur):
            self.motion_blur(image, image_filter.length)
        else:
            raise TypeError(f"Unsupported filter: {image_filter!r}")

    @staticmethod
    def grayscale(image: Image) -> None:
        level = np.clip(image.pixels.sum(axis=2) // 3, 0, MAX_CHANNEL)
        image.pixels[...] = level[:, :, np.newaxis]

    @staticmethod
    def invert(image: Image) -> None:
        image.pixels[...] = MAX_CHANNEL - image.pixels

    @staticmethod
    def emboss(image: Image) -> None:
        """
        Relief effect from the largest signed channel difference with the
        up-left neighbour.

        Walks columns right-to-left and rows bottom-to-top, writing in place
        and reading the neighbour's currently stored value. Pixels on the top
        row or left column get the flat level 128.
        """
        pixels = image.pixels
        for x in range(image.width - 1, -1, -1):
            for y in range(image.height - 1, -1, -1):
                diff = 0
                if x > 0 and y > 0:
                    cur = pixels[y, x].tolist()
                    up_left = pixels[y - 1, x - 1].tolist()
                    # Ties keep the earlier channel (R, then G, then B)
                    for c, u in zip(cur, up_left):
                        if abs(c - u) > abs(diff):
                            diff = c - u

                pixels[y, x] = min(max(EMBOSS_BASE + diff, 0), MAX_CHANNEL)

    @staticmethod
    def motion_blur(image: Image, length: int) -> None:
        """
        Replace each pixel with the floor mean of itself and up to
        ``length - 1`` pixels to its right, stopping at the right edge.
        Reads come from a snapshot taken before any write.
        """
        if length < 1:
            raise ValueError(f"Motion blur length must be >= 1, got {length}")

        height, width = image.height, image.width
        if width == 0 or height == 0:
            return
        # Any window reaching past the right edge averages the same pixels
        length = min(length, width)

        # Prefix sums over the untouched pixels: window sum = csum[end] - csum[start]
        csum = np.zeros((height, width + 1, 3), dtype=image.pixels.dtype)
        np.cumsum(image.pixels, axis=1, out=csum[:, 1:])

        start = np.arange(width)
        end = np.minimum(width - 1, start + length - 1) + 1
        totals = csum[:, end] - csum[:, start]
        counts = (end - start)[np.newaxis, :, np.newaxis]

        image.pixels[...] = totals // counts
