"""Screen-space renderer for images and text anchored to the window."""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import Callable

import numpy as np

from zenithengine.batch_renderer import WHITE, Batch, Vertex
from zenithengine.camera import model_matrix, ortho
from zenithengine.font import Font
from zenithengine.stats import RendererStats, default_stats
from zenithengine.texture import Texture2D

TEXT_COLOR = (0.05, 0.05, 0.05, 1.0)

_TEX_COORDS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))


class Anchor(IntEnum):
    """A point of a rectangle: row (top, middle, bottom) times column."""

    TOP_LEFT = 0
    TOP_CENTER = 1
    TOP_RIGHT = 2
    MIDDLE_LEFT = 3
    MIDDLE_CENTER = 4
    MIDDLE_RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM_CENTER = 7
    BOTTOM_RIGHT = 8


class UILayer(Enum):
    TEXT = auto()
    IMAGE = auto()


class _QuadBuffer:
    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.textures: list[Texture2D] = []

    @property
    def quad_count(self) -> int:
        return len(self.vertices) // 4

    def find(self, texture: Texture2D) -> int | None:
        for slot, bound in enumerate(self.textures):
            if bound is texture:
                return slot
        return None

    def clear(self) -> None:
        self.vertices = []
        self.textures = []


class UIRenderer:
    """Batches images and text in window pixel coordinates, origin bottom-left."""

    def __init__(self, *, quads_per_batch: int = 1000, max_textures: int = 16,
                 stats: RendererStats | None = None,
                 on_flush: Callable[[UILayer, Batch], None] | None = None) -> None:
        if quads_per_batch < 1:
            raise ValueError("quads_per_batch must be at least 1")
        if max_textures < 2:
            raise ValueError("max_textures must be at least 2")
        self.quads_per_batch = quads_per_batch
        self.max_textures = max_textures
        self.stats = stats if stats is not None else default_stats
        self.on_flush = on_flush
        self._window_size = (0, 0)
        self._text = _QuadBuffer()
        self._image = _QuadBuffer()

    @property
    def window_size(self) -> tuple[int, int]:
        return self._window_size

    def _projection(self) -> np.ndarray:
        width, height = self._window_size
        if width <= 0 or height <= 0:
            return np.identity(4)
        return ortho(0.0, width, 0.0, height, -1.0, 1.0)

    def _buffer(self, layer: UILayer) -> _QuadBuffer:
        return self._text if layer is UILayer.TEXT else self._image

    def _end_layer(self, layer: UILayer) -> Batch:
        buffer = self._buffer(layer)
        batch = Batch(tuple(buffer.vertices), tuple(buffer.textures), self._projection())
        buffer.clear()
        self.stats.add_batch()
        if self.on_flush is not None:
            self.on_flush(layer, batch)
        return batch

    def _restart(self) -> None:
        self.end()
        self.begin(self._window_size)

    def _slot(self, buffer: _QuadBuffer, texture: Texture2D, on_full: Callable[[], object]) -> int:
        slot = buffer.find(texture)
        if slot is not None:
            return slot
        if len(buffer.textures) >= self.max_textures - 1:
            on_full()
        buffer.textures.append(texture)
        return len(buffer.textures) - 1

    @staticmethod
    def _emit(buffer: _QuadBuffer, positions, color, slot: int) -> None:
        rgba = tuple(float(c) for c in color)
        buffer.vertices.extend(
            Vertex(tuple(float(v) for v in position[:3]), rgba, uv, float(slot))
            for position, uv in zip(positions, _TEX_COORDS)
        )

    def begin(self, window_size) -> None:
        """Start new text and image batches for a window of ``window_size`` pixels."""
        width, height = window_size
        self._window_size = (int(width), int(height))
        self._text.clear()
        self._image.clear()

    def end(self) -> tuple[Batch, Batch]:
        """Finish the text batch, then the image batch, and return both."""
        return self._end_layer(UILayer.TEXT), self._end_layer(UILayer.IMAGE)

    def draw_image(self, image: Texture2D, position, scale, rotation: float = 0.0,
                   anchor: Anchor = Anchor.MIDDLE_CENTER, pivot: Anchor = Anchor.MIDDLE_CENTER,
                   color=WHITE) -> None:
        """Draw ``image`` ``scale`` pixels large, placed relative to a window anchor."""
        buffer = self._image
        if buffer.quad_count >= self.quads_per_batch:
            self._end_layer(UILayer.IMAGE)
        slot = self._slot(buffer, image, lambda: self._end_layer(UILayer.IMAGE))

        anchor = Anchor(anchor)
        pivot = Anchor(pivot)
        width, height = self._window_size
        px, py = float(position[0]), float(position[1])
        x = (px, width / 2.0 + px, width - px)[anchor % 3]
        y = (height - py, height / 2.0 + py, py)[anchor // 3]

        shift_x = 0.5 * (pivot % 3)
        shift_y = 0.5 * (2 - pivot // 3)
        corners = np.array([
            [0.0 - shift_x, 0.0 - shift_y, 0.0, 1.0],
            [1.0 - shift_x, 0.0 - shift_y, 0.0, 1.0],
            [1.0 - shift_x, 1.0 - shift_y, 0.0, 1.0],
            [0.0 - shift_x, 1.0 - shift_y, 0.0, 1.0],
        ])
        transform = model_matrix((x, y, 0.0), (float(scale[0]), float(scale[1]), 0.0), rotation)
        self._emit(buffer, corners @ transform.T, color, slot)
        self.stats.add_quad()

    def draw_char(self, font: Font, char: str, position, font_size: float = 12.0,
                  color=TEXT_COLOR) -> None:
        """Draw one glyph with its bottom-left corner at ``position``."""
        buffer = self._text
        if buffer.quad_count >= self.quads_per_batch:
            self._restart()
        glyph = font.glyph(char)
        slot = self._slot(buffer, glyph.texture, self._restart)

        factor = font_size / font.font_size
        width = glyph.size[0] * factor
        height = glyph.size[1] * factor
        px, py = float(position[0]), float(position[1])
        positions = [
            (px, py, 0.0),
            (px + width, py, 0.0),
            (px + width, py + height, 0.0),
            (px, py + height, 0.0),
        ]
        self._emit(buffer, positions, color, slot)
        self.stats.add_quad()

    def draw_text(self, font: Font, text: str, position, anchor: Anchor | None = None,
                  font_size: float = 12.0, color=TEXT_COLOR) -> None:
        """Draw ``text``; with an anchor, ``position`` is relative to that window point."""
        if anchor is None:
            self._draw_text_at(font, text, (float(position[0]), float(position[1])), font_size, color)
            return

        anchor = Anchor(anchor)
        factor = font_size / font.font_size
        box_height = font.font_size * factor
        box_width = sum(
            (glyph.bearing[0] + glyph.advance) * factor
            for glyph in map(font.glyph, text)
        )
        width, height = self._window_size
        px, py = float(position[0]), float(position[1])
        x = (px, width / 2.0 + px - box_width / 2.0, width - px - box_width)[anchor % 3]
        y = (height - py - box_height, height / 2.0 + py - box_height / 2.0, py)[anchor // 3]
        self._draw_text_at(font, text, (x, y), font_size, color)

    def _draw_text_at(self, font: Font, text: str, origin: tuple[float, float],
                      font_size: float, color) -> None:
        factor = font_size / font.font_size
        offset_x = 0.0
        for char in text:
            glyph = font.glyph(char)
            offset_x += glyph.bearing[0] * factor
            offset_y = -(glyph.size[1] - glyph.bearing[1]) * factor
            self.draw_char(font, char, (origin[0] + offset_x, origin[1] + offset_y), font_size, color)
            offset_x += glyph.advance * factor