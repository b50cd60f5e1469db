from __future__ import annotations
from dataclasses import dataclass
from typing import List, Union
import re

from .errors import UsageError


@dataclass(frozen=True)
class Grayscale:
    """Average the three channels of every pixel."""


@dataclass(frozen=True)
class Invert:
    """Replace every channel with 255 - channel."""


@dataclass(frozen=True)
class Emboss:
    """Relief effect from the difference with the up-left neighbour."""


@dataclass(frozen=True)
class MotionBlur:
    """
    Horizontal smear: each pixel becomes the mean of itself and up to
    ``length - 1`` pixels to its right.
    """
    length: int

    def __post_init__(self):
        if self.length < 1:
            raise ValueError(f"Motion blur length must be >= 1, got {self.length}")


ImageFilter = Union[Grayscale, Invert, Emboss, MotionBlur]

# CLI word -> filter taking no extra argument
_SIMPLE_FILTERS = {
    "grayscale": Grayscale,
    "greyscale": Grayscale,
    "invert": Invert,
    "emboss": Emboss,
}
MOTION_BLUR = "motionblur"
# Plain ASCII decimal only: int() would also take "1_0" and non-ASCII digits
DECIMAL_ARG = re.compile(r"[+-]?[0-9]+")
FILTER_NAMES = (*_SIMPLE_FILTERS, MOTION_BLUR)


def parse_filter(name: str, extra_args: List[str]) -> ImageFilter:
    """
    Turn a filter name and its trailing arguments into a filter variant.

    Raises:
        UsageError: unknown name, wrong argument count, or a blur length
            that is not a positive integer.
    """
    if name in _SIMPLE_FILTERS:
        if extra_args:
            raise UsageError(f"'{name}' takes no extra arguments, got {len(extra_args)}")
        return _SIMPLE_FILTERS[name]()

    if name == MOTION_BLUR:
        if len(extra_args) != 1:
            raise UsageError(f"'{MOTION_BLUR}' takes exactly one length argument, got {len(extra_args)}")
        if not DECIMAL_ARG.fullmatch(extra_args[0]):
            raise UsageError(f"Invalid motion blur length {extra_args[0]!r}")
        try:
            return MotionBlur(int(extra_args[0]))
        except ValueError as err:
            raise UsageError(f"Invalid motion blur length {extra_args[0]!r}: {err}") from err

    raise UsageError(f"Unknown filter {name!r}")
