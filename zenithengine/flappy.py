"""Game objects of the side-scrolling bird demo: background, bird and pipes."""

from __future__ import annotations

import random
from typing import Callable, Protocol, Sequence

import numpy as np

from zenithengine import input as engine_input
from zenithengine import timing
from zenithengine.batch_renderer import BatchRenderer
from zenithengine.keys import Key
from zenithengine.texture import Texture2D

GRAVITY = 9.807
FLAP_VELOCITY = 3.35
ANIMATION_FPS = 8.0
ANIMATION_FRAMES = 3
PIPE_GAP = 1.15
PIPE_RESET_X = -9.0
PIPE_LOOP_DISTANCE = 18.0
# Copies of the background drawn on each side of its position.
_BACKGROUND_REPEAT = 5


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _vec3(values) -> np.ndarray:
    data = np.asarray(values, dtype=float).ravel()
    if data.size == 2:
        data = np.append(data, 0.0)
    if data.size != 3:
        raise ValueError("expected two or three components")
    return data


def _space_just_pressed() -> bool:
    return engine_input.is_key_just_pressed(Key.SPACE)


def _random_height(rng: _RandomSource) -> float:
    return (rng.randrange(35) - 17) / 20.0


class Background:
    """A texture tiled horizontally that scrolls with a constant velocity."""

    def __init__(self, texture: Texture2D, velocity, *,
                 delta_time: Callable[[], float] = timing.delta) -> None:
        self.texture = texture
        self.position = np.zeros(3)
        self.velocity = _vec3(velocity)
        self._delta_time = delta_time

    @property
    def _tile_width(self) -> float:
        return self.texture.width / self.texture.pixels_per_unit

    def update(self) -> None:
        """Scroll, jumping one tile forward once half a tile has passed."""
        self.position = self.position + self.velocity * self._delta_time()
        if self.position[0] <= -self._tile_width / 2.0:
            self.position[0] += self._tile_width

    def render(self, renderer: BatchRenderer) -> None:
        """Draw the tiles from five widths left to five widths right."""
        width = self._tile_width
        for tile in range(-_BACKGROUND_REPEAT, _BACKGROUND_REPEAT + 1):
            renderer.draw_texture(self.texture, self.position + np.array([tile * width, 0.0, 0.0]))


class Bird:
    """The player: falls under gravity and flaps upwards on demand."""

    def __init__(self, textures: Sequence[Texture2D], *,
                 flap_pressed: Callable[[], bool] = _space_just_pressed,
                 on_flap: Callable[[], object] | None = None,
                 delta_time: Callable[[], float] = timing.delta) -> None:
        if len(textures) < ANIMATION_FRAMES:
            raise ValueError(f"a bird needs {ANIMATION_FRAMES} animation textures")
        self.textures = tuple(textures)
        self.current_texture = self.textures[0]
        self.position = np.zeros(3)
        self.velocity = np.zeros(3)
        self.rotation = 0.0
        self._flap_pressed = flap_pressed
        self._on_flap = on_flap
        self._delta_time = delta_time

    def start(self) -> None:
        """Put the bird back at height zero, at rest vertically."""
        self.position[1] = 0.0
        self.velocity[1] = 0.0

    def update(self, time_elapsed: float) -> None:
        """Advance animation and motion; flap if asked to."""
        frame = int(time_elapsed * ANIMATION_FPS) % ANIMATION_FRAMES
        self.current_texture = self.textures[frame]

        dt = self._delta_time()
        self.position = self.position + self.velocity * dt
        self.velocity[1] -= GRAVITY * dt

        if self._flap_pressed():
            self.velocity[1] = FLAP_VELOCITY
            if self._on_flap is not None:
                self._on_flap()

        self.rotation = 45.0 * self.velocity[1] / 10.0

    def render(self, renderer: BatchRenderer) -> None:
        renderer.draw_texture(self.current_texture, self.position, rotation=self.rotation)


class Pipe:
    """A pair of pipes with a gap between them, scrolling towards the bird."""

    gap = PIPE_GAP

    def __init__(self, texture: Texture2D, position_x: float, velocity, bird: Bird, *,
                 rng: _RandomSource = random,
                 delta_time: Callable[[], float] = timing.delta) -> None:
        self.texture = texture
        self.velocity = _vec3(velocity)
        self.bird = bird
        self._rng = rng
        self._delta_time = delta_time
        self.position = np.array([float(position_x), _random_height(rng), 0.0])

    def update(self, on_between_gaps: Callable[[bool], object]) -> None:
        """Move; while level with the bird report whether it hits the pipes."""
        self.position = self.position + self.velocity * self._delta_time()

        reach = (self.texture.width / 2.0 + 17.0) / self.texture.pixels_per_unit
        if abs(self.position[0] - self.bird.position[0]) < reach:
            collides = abs(self.position[1] - self.bird.position[1]) > self.gap / 2.0 - 0.12
            on_between_gaps(collides)

        if self.position[0] <= PIPE_RESET_X:
            self.position[0] += PIPE_LOOP_DISTANCE
            self.position[1] = _random_height(self._rng)

    def render(self, renderer: BatchRenderer) -> None:
        """Draw the upper pipe flipped, then the lower pipe."""
        height = self.texture.height / self.texture.pixels_per_unit
        offset = np.array([0.0, self.gap / 2.0 + height / 2.0, 0.0])
        renderer.draw_texture(self.texture, self.position + offset, (1.0, -1.0, 0.0))
        renderer.draw_texture(self.texture, self.position - offset, (1.0, 1.0, 0.0))