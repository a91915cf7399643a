"""2D textures held as pixel arrays."""

from __future__ import annotations

import os
from enum import IntEnum

import numpy as np
from PIL import Image

from zenithengine.exceptions import ResourceNotFoundError


class Filter(IntEnum):
    POINT = 0
    BILINEAR = 1
    TRILINEAR = 2


class Wrap(IntEnum):
    REPEAT = 0
    CLAMP = 1


_MODE_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


class Texture2D:
    """Pixel data of shape (height, width, channels) with sampling settings.

    Rows are stored bottom row first.
    """

    def __init__(self, pixels, pixels_per_unit: int = 100, filter: Filter = Filter.BILINEAR,
                 wrap: Wrap = Wrap.CLAMP) -> None:
        data = np.asarray(pixels, dtype=np.uint8)
        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        if data.ndim != 3 or not 1 <= data.shape[2] <= 4:
            raise ValueError(f"unsupported pixel layout: {data.shape}")
        if pixels_per_unit <= 0:
            raise ValueError("pixels_per_unit must be positive")
        self.pixels = data
        self.pixels_per_unit = pixels_per_unit
        self.filter = Filter(filter)
        self.wrap = Wrap(wrap)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def channel_count(self) -> int:
        return self.pixels.shape[2]

    @property
    def size_in_units(self) -> tuple[float, float]:
        """Width and height in world units."""
        return (self.width / self.pixels_per_unit, self.height / self.pixels_per_unit)

    def set_filter(self, filter: Filter) -> None:
        self.filter = Filter(filter)

    def set_wrap(self, wrap: Wrap) -> None:
        self.wrap = Wrap(wrap)

    def __repr__(self) -> str:
        return (f"Texture2D({self.width}x{self.height}x{self.channel_count}, "
                f"ppu={self.pixels_per_unit}, {self.filter.name}, {self.wrap.name})")


def white_texture() -> Texture2D:
    """A single opaque white pixel, one pixel per unit."""
    return Texture2D(np.full((1, 1, 4), 255, dtype=np.uint8), 1, Filter.POINT, Wrap.CLAMP)


def texture_from_memory(pixels, width: int, height: int, channel_count: int, pixels_per_unit: int = 100,
                        filter: Filter = Filter.BILINEAR, wrap: Wrap = Wrap.CLAMP) -> Texture2D:
    """Build a texture from tightly packed bytes, bottom row first."""
    if not 1 <= channel_count <= 4:
        raise ValueError(f"unsupported channel count: {channel_count}")
    data = np.frombuffer(bytes(pixels), dtype=np.uint8)
    expected = width * height * channel_count
    if data.size != expected:
        raise ValueError(f"expected {expected} bytes, got {data.size}")
    return Texture2D(data.reshape(height, width, channel_count), pixels_per_unit, filter, wrap)


def load_texture(path, pixels_per_unit: int = 100, force_rgba: bool = False,
                 filter: Filter = Filter.BILINEAR, wrap: Wrap = Wrap.CLAMP) -> Texture2D:
    """Load an image file, flipped so that its bottom row comes first."""
    try:
        with Image.open(path) as image:
            if force_rgba:
                image = image.convert("RGBA")
            elif image.mode not in _MODE_CHANNELS:
                has_alpha = "A" in image.getbands() or "transparency" in image.info
                image = image.convert("RGBA" if has_alpha else "RGB")
            data = np.asarray(image, dtype=np.uint8)
    except OSError as exc:
        raise ResourceNotFoundError(os.fspath(path)) from exc
    return Texture2D(np.flipud(data).copy(), pixels_per_unit, filter, wrap)