from pathlib import Path
from typing import Union
import logging

from ..models.image import Image
from ..models.image_filter import ImageFilter
from ..services.filter_service import FilterService
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)


def edit_image(
    in_file: Union[str, Path],
    out_file: Union[str, Path],
    image_filter: ImageFilter,
    image_service: ImageService = None,
    filter_service: FilterService = None,
) -> Image:
    """
    Load a P3 image, apply one filter in place and write the result.

    The output file is only written once the filter has finished, so a
    decode or filter failure leaves ``out_file`` untouched.
    """
    image_service = image_service or ImageService()
    filter_service = filter_service or FilterService()

    logger.info(f"Reading {in_file}")
    image = image_service.load(in_file)

    filter_service.apply(image, image_filter)

    written = image_service.save(image, out_file)
    logger.info(f"Wrote {written}")
    return image
