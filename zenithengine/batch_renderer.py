"""Collects textured quads into batches ready to be submitted for drawing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from zenithengine.camera import model_matrix
from zenithengine.stats import RendererStats, default_stats
from zenithengine.texture import Texture2D

WHITE = (1.0, 1.0, 1.0, 1.0)
DEFAULT_SCALE = (1.0, 1.0, 0.0)

_TEX_COORDS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))


def quad_indices(quad_count: int) -> np.ndarray:
    """Triangle indices for ``quad_count`` quads of four vertices each."""
    pattern = np.array([0, 1, 2, 0, 2, 3], dtype=np.uint16)
    offsets = (np.arange(quad_count, dtype=np.uint16) * 4)[:, np.newaxis]
    return (pattern + offsets).ravel().astype(np.uint16)


@dataclass(frozen=True)
class Vertex:
    position: tuple[float, float, float]
    color: tuple[float, float, float, float]
    texture_coords: tuple[float, float]
    texture_index: float


@dataclass(frozen=True, eq=False)
class Batch:
    """Everything needed to draw one batch: vertices, bound textures and camera."""

    vertices: tuple[Vertex, ...]
    textures: tuple[Texture2D, ...]
    view_projection: np.ndarray

    @property
    def quad_count(self) -> int:
        return len(self.vertices) // 4

    @property
    def index_count(self) -> int:
        return self.quad_count * 6

    @property
    def indices(self) -> np.ndarray:
        return quad_indices(self.quad_count)


class BatchRenderer:
    """Accumulates quads and emits a ``Batch`` when full or when ended."""

    def __init__(self, *, quads_per_batch: int = 1000, max_textures: int = 16,
                 stats: RendererStats | None = None,
                 on_flush: Callable[[Batch], None] | None = None) -> None:
        if quads_per_batch < 1:
            raise ValueError("quads_per_batch must be at least 1")
        if max_textures < 2:
            raise ValueError("max_textures must be at least 2")
        self.quads_per_batch = quads_per_batch
        self.max_textures = max_textures
        self.stats = stats if stats is not None else default_stats
        self.on_flush = on_flush
        self._vertices: list[Vertex] = []
        self._textures: list[Texture2D] = []
        self._view_projection = np.identity(4)

    @property
    def quad_count(self) -> int:
        return len(self._vertices) // 4

    def begin(self, view_projection=None) -> None:
        """Start a new batch drawn with ``view_projection`` (identity by default)."""
        self._vertices = []
        self._textures = []
        self._view_projection = (np.identity(4) if view_projection is None
                                 else np.array(view_projection, dtype=float))

    def end(self) -> Batch:
        """Finish the current batch, hand it to ``on_flush`` and return it."""
        batch = Batch(tuple(self._vertices), tuple(self._textures), self._view_projection.copy())
        self._vertices = []
        self._textures = []
        self.stats.add_batch()
        if self.on_flush is not None:
            self.on_flush(batch)
        return batch

    def _flush(self) -> None:
        self.end()
        self.begin(self._view_projection)

    def _slot_for(self, texture: Texture2D) -> int:
        for slot, bound in enumerate(self._textures):
            if bound is texture:
                return slot
        if len(self._textures) >= self.max_textures - 1:
            self._flush()
        self._textures.append(texture)
        return len(self._textures) - 1

    def draw_quad(self, texture: Texture2D, transform, color=WHITE) -> None:
        """Add a quad the size of ``texture`` in world units, transformed by ``transform``."""
        if self.quad_count >= self.quads_per_batch:
            self._flush()
        slot = float(self._slot_for(texture))
        half_w, half_h = (size / 2.0 for size in texture.size_in_units)
        corners = np.array([
            [-half_w, -half_h, 0.0, 1.0],
            [half_w, -half_h, 0.0, 1.0],
            [half_w, half_h, 0.0, 1.0],
            [-half_w, half_h, 0.0, 1.0],
        ])
        positions = corners @ np.asarray(transform, dtype=float).T
        rgba = tuple(float(c) for c in color)
        self._vertices.extend(
            Vertex(tuple(float(v) for v in position[:3]), rgba, uv, slot)
            for position, uv in zip(positions, _TEX_COORDS)
        )
        self.stats.add_quad()

    def draw_texture(self, texture: Texture2D, position, scale=DEFAULT_SCALE, rotation: float = 0.0,
                     color=WHITE) -> None:
        """Draw ``texture`` at ``position``, scaled and rotated by ``rotation`` degrees."""
        self.draw_quad(texture, model_matrix(position, scale, rotation), color)