from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Color:
    """
    Value-object holding one RGB pixel.
    Channels are plain ints; callers clamp to [0, 255] before storing.
    """
    red: int = 0
    green: int = 0
    blue: int = 0

    def as_tuple(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue
