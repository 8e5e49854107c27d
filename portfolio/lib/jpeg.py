"""JPEG dimension probing.

Reads the pixel size of a JPEG by scanning for its Start-of-Frame marker,
without decoding the image.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

__all__ = [
    "ImageDimensions",
    "SOF_MARKERS",
    "read_jpeg_dimensions",
    "probe_file",
]

# SOF0-SOF15, minus DHT (C4), JPG (C8) and DAC (CC)
SOF_MARKERS = frozenset(
    list(range(0xC0, 0xC4)) + list(range(0xC5, 0xC8)) + list(range(0xC9, 0xCC)) + list(range(0xCD, 0xD0))
)


@dataclass(frozen=True)
class ImageDimensions:
    """Pixel size of an image."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def read_jpeg_dimensions(data: bytes) -> Optional[ImageDimensions]:
    """Return the dimensions from the first SOF marker in ``data``.

    The frame header stores height at offset 5 and width at offset 7 from
    the 0xFF byte, both big-endian. Returns None when no SOF marker with a
    complete header is found.
    """
    for i in range(len(data) - 1):
        if data[i] != 0xFF or data[i + 1] not in SOF_MARKERS:
            continue
        if i + 9 > len(data):
            return None
        height, width = struct.unpack_from(">HH", data, i + 5)
        return ImageDimensions(width=width, height=height)
    return None


def probe_file(path: Union[str, Path]) -> Optional[ImageDimensions]:
    """Read a file from disk and return its JPEG dimensions.

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    data = Path(path).read_bytes()
    dimensions = read_jpeg_dimensions(data)
    if dimensions is None:
        logger.debug("No SOF marker found in %s", path)
    return dimensions
