class InvalidFormat(ValueError):
    """Raised when a text blob is not an 8-bit plain-text PPM (P3)."""


class OutOfBounds(IndexError):
    """Raised on pixel access outside the image grid."""

    def __init__(self, x: int, y: int):
        super().__init__(f"Invalid coordinates ({x}, {y})")
        self.x = x
        self.y = y


class UsageError(ValueError):
    """Bad command-line arguments. Recovered by printing usage instructions."""
