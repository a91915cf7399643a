"""Counters of the rendering work done in a frame."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RendererStats:
    """Number of batches, triangles and vertices submitted."""

    batch_count: int = 0
    triangle_count: int = 0
    vertex_count: int = 0

    def reset(self) -> None:
        """Zero every counter."""
        self.batch_count = 0
        self.triangle_count = 0
        self.vertex_count = 0

    def add_quad(self) -> None:
        """Count one quad: two triangles and four vertices."""
        self.triangle_count += 2
        self.vertex_count += 4

    def add_batch(self) -> None:
        """Count one submitted batch."""
        self.batch_count += 1


# Counters shared by the renderers and the application loop.
default_stats = RendererStats()