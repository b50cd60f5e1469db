"""Plain-text PPM (P3) image filters: grayscale, invert, emboss, motion blur."""

__version__ = "1.0.0"
