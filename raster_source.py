# filename: raster_source.py

import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from errors import SourceUnreadableError

logger = logging.getLogger(__name__)

# Modes holding more than 8 bits per sample; reduced to their top byte.
WIDE_GRAY_MODES = ("I", "I;16", "I;16B", "I;16L", "I;16N")


def _to_samples(img):
    if img.mode in WIDE_GRAY_MODES:
        wide = np.clip(np.array(img, dtype=np.int64), 0, 0xFFFF)
        return (wide >> 8).astype(np.uint8)
    return np.array(img.convert("L"), dtype=np.uint8)


def load_grayscale(path):
    """Decode an image file into a 2-D uint8 array of luminance samples.

    Color images are converted to a single 8-bit channel ("L" mode); 16-bit
    grayscale keeps its most significant byte.
    """
    try:
        with Image.open(path) as img:
            samples = _to_samples(img)
    except FileNotFoundError as e:
        raise SourceUnreadableError(f"could not open or find the image '{path}'") from e
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise SourceUnreadableError(f"could not decode the image '{path}': {e}") from e

    logger.debug("loaded %s: %dx%d samples", path, samples.shape[1], samples.shape[0])
    return samples
