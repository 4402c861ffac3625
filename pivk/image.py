"""Raw G24/G32 image files: a 16-bit size header followed by BGR(A) pixels."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

_HEADER = struct.Struct("<HH")
_OPAQUE = 0xFF << 24


class ImageType(Enum):
    """Pixel layout of an image file; the value is bytes per pixel."""

    G24 = 3
    G32 = 4


@dataclass
class Image:
    """Image of width x height pixels, each a 32-bit BGRA value."""

    width: int
    height: int
    pixels: list[int] = field(repr=False)

    def __post_init__(self):
        self.pixels = list(self.pixels)
        if self.width < 0 or self.height < 0:
            raise ValueError("image size cannot be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match the image size")

    @classmethod
    def from_bytes(cls, data: bytes, kind: ImageType = ImageType.G32) -> "Image":
        """Decode an image held in memory."""
        kind = ImageType(kind)
        if len(data) < _HEADER.size:
            raise ValueError("image data is shorter than its header")
        width, height = _HEADER.unpack_from(data)
        need = width * height * kind.value
        body = bytes(data[_HEADER.size:_HEADER.size + need])
        if len(body) < need:
            raise ValueError("image data ends before the last pixel")
        if kind is ImageType.G32:
            pixels = [value for (value,) in struct.iter_unpack("<I", body)]
        else:
            pixels = [b | (g << 8) | (r << 16) | _OPAQUE
                      for b, g, r in struct.iter_unpack("<3B", body)]
        return cls(width, height, pixels)

    @classmethod
    def load(cls, path: Union[str, Path], kind: ImageType = ImageType.G32) -> "Image":
        """Read an image from a file."""
        return cls.from_bytes(Path(path).read_bytes(), kind)