"""Shared test fixtures for the PPM image editor."""

from __future__ import annotations

import numpy as np
import pytest

from ppm_editor.models.image import Image
from ppm_editor.repositories.ppm_repository import PPMRepository
from ppm_editor.services.filter_service import FilterService


@pytest.fixture()
def make_image():
    """Factory building an Image from nested lists: rows[y][x] == (r, g, b)."""
    def _make(rows) -> Image:
        return Image(pixels=np.array(rows, dtype=np.int64).reshape(len(rows), -1, 3))
    return _make


@pytest.fixture()
def filter_service() -> FilterService:
    return FilterService()


@pytest.fixture()
def ppm_repository() -> PPMRepository:
    return PPMRepository()


@pytest.fixture()
def sample_image(make_image) -> Image:
    """A 3x2 image with distinct pixels."""
    return make_image([
        [(10, 20, 30), (200, 100, 50), (0, 0, 0)],
        [(255, 255, 255), (1, 2, 3), (90, 180, 45)],
    ])


@pytest.fixture()
def sample_text() -> str:
    """P3 encoding of ``sample_image``."""
    return (
        "P3\n"
        "3 2\n"
        "255\n"
        "10 20 30 200 100 50 0 0 0\n"
        "255 255 255 1 2 3 90 180 45\n"
    )
