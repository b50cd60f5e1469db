"""Tests for Color, Image and the filter variants."""

from __future__ import annotations

import numpy as np
import pytest

from ppm_editor.models.color import Color
from ppm_editor.models.errors import OutOfBounds, UsageError
from ppm_editor.models.image import Image
from ppm_editor.models.image_filter import (
    Emboss,
    Grayscale,
    Invert,
    MotionBlur,
    parse_filter,
)


class TestColor:
    def test_defaults(self) -> None:
        c = Color()
        assert c.as_tuple() == (0, 0, 0)

    def test_no_implicit_clamping(self) -> None:
        c = Color(300, -5, 12)
        assert (c.red, c.green, c.blue) == (300, -5, 12)


class TestImage:
    def test_blank_dimensions(self) -> None:
        img = Image.blank(4, 3)
        assert img.width == 4
        assert img.height == 3
        assert img.get(3, 2) == Color(0, 0, 0)

    def test_zero_width_keeps_height(self) -> None:
        img = Image.blank(0, 5)
        assert img.width == 0
        assert img.height == 5

    def test_negative_dimensions_rejected(self) -> None:
        with pytest.raises(ValueError):
            Image.blank(-1, 2)

    def test_set_then_get(self) -> None:
        img = Image.blank(2, 2)
        img.set(1, 0, Color(7, 8, 9))
        assert img.get(1, 0) == Color(7, 8, 9)
        assert img.get(0, 1) == Color(0, 0, 0)

    def test_get_returns_copy(self) -> None:
        img = Image.blank(1, 1)
        c = img.get(0, 0)
        c.red = 99
        assert img.get(0, 0).red == 0

    def test_set_does_not_alias(self) -> None:
        img = Image.blank(1, 1)
        c = Color(1, 2, 3)
        img.set(0, 0, c)
        c.blue = 200
        assert img.get(0, 0) == Color(1, 2, 3)

    @pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, x: int, y: int) -> None:
        img = Image.blank(3, 2)
        with pytest.raises(OutOfBounds, match=r"Invalid coordinates"):
            img.get(x, y)
        with pytest.raises(OutOfBounds):
            img.set(x, y, Color())

    def test_out_of_bounds_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            Image.blank(1, 1).get(1, 1)

    def test_equality_and_copy(self, sample_image: Image) -> None:
        dup = sample_image.copy()
        assert dup == sample_image
        dup.set(0, 0, Color(1, 1, 1))
        assert dup != sample_image

    def test_bad_pixel_shape(self) -> None:
        with pytest.raises(ValueError):
            Image(pixels=np.zeros((2, 2)))


class TestMotionBlurVariant:
    def test_valid_length(self) -> None:
        assert MotionBlur(3).length == 3

    def test_length_below_one(self) -> None:
        with pytest.raises(ValueError):
            MotionBlur(0)


class TestParseFilter:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("grayscale", Grayscale()),
            ("greyscale", Grayscale()),
            ("invert", Invert()),
            ("emboss", Emboss()),
        ],
    )
    def test_simple_filters(self, name: str, expected) -> None:
        assert parse_filter(name, []) == expected

    def test_motionblur(self) -> None:
        assert parse_filter("motionblur", ["4"]) == MotionBlur(4)

    def test_motionblur_huge_length(self) -> None:
        assert parse_filter("motionblur", ["99999999999999999999"]) == MotionBlur(10**20 - 1)

    @pytest.mark.parametrize(
        "name, extra",
        [
            ("invert", ["3"]),
            ("emboss", ["a", "b"]),
            ("motionblur", []),
            ("motionblur", ["2", "3"]),
            ("motionblur", ["0"]),
            ("motionblur", ["-2"]),
            ("motionblur", ["abc"]),
            ("motionblur", ["1_0"]),
            ("motionblur", ["\u0663"]),
            ("sharpen", []),
        ],
    )
    def test_usage_errors(self, name: str, extra) -> None:
        with pytest.raises(UsageError):
            parse_filter(name, extra)
