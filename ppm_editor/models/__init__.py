from .color import Color
from .image import Image
from .image_filter import Emboss, Grayscale, ImageFilter, Invert, MotionBlur
from .errors import InvalidFormat, OutOfBounds, UsageError
