from pathlib import Path
from typing import List, Union
import logging
import re

import numpy as np

from ..models.image import Image, PIXEL_DTYPE
from ..models.errors import InvalidFormat

logger = logging.getLogger(__name__)

MAGIC = "P3"
MAX_COLOR_VALUE = 255
HEADER_TOKENS = 4
# Plain ASCII decimal only: int() would also take "1_0" and non-ASCII digits
DECIMAL_TOKEN = re.compile(r"[+-]?[0-9]+")


class PPMRepository:
    """
    Handles the plain-text PPM (P3) format and file I/O for Image entities.
    """
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    # ─── Codec ─────────────────────────────────────────────────────
    @staticmethod
    def _parse_int(token: str, what: str) -> int:
        if not DECIMAL_TOKEN.fullmatch(token):
            raise InvalidFormat(f"Invalid PPM file: {what} is not an integer: {token!r}")
        return int(token)

    @classmethod
    def decode(cls, text: str) -> Image:
        """
        Parse a P3 text blob into an Image.

        Tokens are whitespace-delimited and may span lines. Pixel triples are
        read row-major: all columns of row 0, then row 1, and so on.
        Trailing tokens after the last pixel are ignored.
        """
        tokens: List[str] = text.split()

        if not tokens or tokens[0] != MAGIC:
            raise InvalidFormat("Invalid PPM file: missing P3 header")
        if len(tokens) < HEADER_TOKENS:
            raise InvalidFormat("Invalid PPM file: truncated header")

        width = cls._parse_int(tokens[1], "width")
        height = cls._parse_int(tokens[2], "height")
        if width < 0 or height < 0:
            raise InvalidFormat(f"Invalid PPM file: negative dimensions {width}x{height}")

        max_val = cls._parse_int(tokens[3], "max color value")
        if max_val != MAX_COLOR_VALUE:
            raise InvalidFormat(f"Invalid max color value, must be {MAX_COLOR_VALUE}")

        expected = width * height * 3
        body = tokens[HEADER_TOKENS:HEADER_TOKENS + expected]
        if len(body) < expected:
            raise InvalidFormat(
                f"Invalid PPM file: expected {expected} color values for {width}x{height}, got {len(body)}"
            )

        ints = [cls._parse_int(tok, "color value") for tok in body]
        try:
            pixels = np.array(ints, dtype=PIXEL_DTYPE).reshape(height, width, 3)
        except (ValueError, OverflowError) as err:
            raise InvalidFormat(f"Invalid PPM file: {err}") from err

        logger.debug(f"Decoded {width}x{height} P3 image")
        return Image(pixels=pixels)

    @staticmethod
    def encode(image: Image) -> str:
        """
        Serialise an Image to P3 text: one line per row, single spaces
        between triples and between the channels of a triple.
        """
        lines = [MAGIC, f"{image.width} {image.height}", str(MAX_COLOR_VALUE)]
        for row in image.pixels:
            lines.append(" ".join(str(v) for v in row.ravel().tolist()))
        return "\n".join(lines) + "\n"

    # ─── File I/O ──────────────────────────────────────────────────
    def load(self, path: Union[str, Path]) -> Image:
        path = Path(path)
        # OSError (missing file, permissions) propagates unchanged
        text = path.read_text(encoding=self.encoding)
        image = self.decode(text)
        image.path = path
        return image

    def save(self, image: Image, path: Union[str, Path]) -> Path:
        path = Path(path)
        # newline="\n" keeps the output byte-identical on every platform
        with open(path, "w", encoding=self.encoding, newline="\n") as f:
            f.write(self.encode(image))
        logger.debug(f"Wrote {image.width}x{image.height} image to {path}")
        return path
