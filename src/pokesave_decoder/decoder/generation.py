"""Save generation detection from image size."""

import logging
from enum import IntEnum

from .errors import UnsupportedFormat

logger = logging.getLogger(__name__)


class Generation(IntEnum):
    """Major save-format era."""
    ONE = 1
    TWO = 2
    THREE = 3

    @property
    def description(self) -> str:
        return GAME_VERSIONS[self]


GAME_VERSIONS = {
    Generation.ONE: "Generation 1 (Red/Blue/Yellow)",
    Generation.TWO: "Generation 2 (Gold/Silver/Crystal)",
    Generation.THREE: "Generation 3 (Ruby/Sapphire/Emerald/FireRed/LeafGreen)",
}

IMAGE_SIZES = {
    32768: Generation.ONE,
    65536: Generation.TWO,
    131072: Generation.THREE,
}


def detect_generation(image_length: int) -> Generation:
    """Map an exact image length to its generation.

    Raises:
        UnsupportedFormat: If the length matches no known generation
    """
    generation = IMAGE_SIZES.get(image_length)
    if generation is None:
        logger.warning("Unsupported save image size: %d bytes", image_length)
        raise UnsupportedFormat(image_length)
    logger.debug("Detected %s from %d-byte image", generation.name, image_length)
    return generation
