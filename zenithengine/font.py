"""Bitmap fonts rendered glyph by glyph into textures."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from zenithengine.exceptions import InitializationError, ResourceNotFoundError
from zenithengine.texture import Filter, Texture2D, Wrap

# Characters rendered for every font: codes 0 up to and not including this one.
_CHARACTER_LIMIT = 255


@dataclass(frozen=True)
class Glyph:
    """One rendered character.

    ``size`` is the bitmap size in pixels, ``bearing`` the offset from the
    pen position on the baseline to the top-left of the bitmap, and
    ``advance`` the horizontal distance in pixels to the next pen position.
    """

    texture: Texture2D
    size: tuple[int, int] = (0, 0)
    bearing: tuple[int, int] = (0, 0)
    advance: int = 0


def _empty_texture() -> Texture2D:
    return Texture2D(np.zeros((0, 0, 1), dtype=np.uint8), 1, Filter.POINT, Wrap.CLAMP)


@dataclass
class Font:
    """A set of glyphs; ``font_size`` defaults to the tallest glyph height."""

    glyphs: dict[str, Glyph]
    font_size: int | None = None
    _missing: Glyph = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.font_size is None:
            self.font_size = max((glyph.size[1] for glyph in self.glyphs.values()), default=0)
        self._missing = Glyph(_empty_texture())

    def glyph(self, char: str) -> Glyph:
        """The glyph of ``char``, or an empty glyph if the font lacks it."""
        return self.glyphs.get(char, self._missing)

    def __contains__(self, char: object) -> bool:
        return char in self.glyphs


def _texture_filter(filter: Filter) -> Filter:
    return Filter.POINT if Filter(filter) is Filter.POINT else Filter.BILINEAR


def _render_glyph(image_font, char: str, tex_filter: Filter) -> Glyph:
    left, top, right, bottom = image_font.getbbox(char, anchor="ls")
    advance = int(image_font.getlength(char))
    width = max(int(right - left), 0)
    height = max(int(bottom - top), 0)
    if width and height:
        bitmap = Image.new("L", (width, height), 0)
        ImageDraw.Draw(bitmap).text((-left, -top), char, font=image_font, fill=255, anchor="ls")
        pixels = np.flipud(np.asarray(bitmap, dtype=np.uint8)).copy()
    else:
        pixels = np.zeros((height, width, 1), dtype=np.uint8)
    texture = Texture2D(pixels, 1, tex_filter, Wrap.CLAMP)
    return Glyph(texture, (width, height), (int(left), int(-top)), advance)


def load_font(path, font_size: int = 64, filter: Filter = Filter.BILINEAR) -> Font:
    """Render the first 255 characters of a TrueType font at ``font_size`` pixels."""
    try:
        image_font = ImageFont.truetype(os.fspath(path), font_size)
    except ImportError as exc:
        raise InitializationError("Failed to initialize FreeType library!") from exc
    except OSError as exc:
        raise ResourceNotFoundError(os.fspath(path)) from exc

    tex_filter = _texture_filter(filter)
    glyphs: dict[str, Glyph] = {}
    for code in range(_CHARACTER_LIMIT):
        char = chr(code)
        try:
            glyphs[char] = _render_glyph(image_font, char, tex_filter)
        except (OSError, ValueError):
            continue
    return Font(glyphs)