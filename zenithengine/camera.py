"""Orthographic 2D camera and the matrix helpers it relies on."""

from __future__ import annotations

import math

import numpy as np

from zenithengine.viewport import Viewport


def _vec3(values) -> np.ndarray:
    data = np.asarray(values, dtype=float).ravel()
    if data.size == 2:
        data = np.append(data, 0.0)
    if data.size != 3:
        raise ValueError("expected two or three components")
    return data


def _translation(offset) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def _rotation_z(degrees: float) -> np.ndarray:
    angle = math.radians(degrees)
    cos, sin = math.cos(angle), math.sin(angle)
    matrix = np.identity(4)
    matrix[0, 0] = cos
    matrix[0, 1] = -sin
    matrix[1, 0] = sin
    matrix[1, 1] = cos
    return matrix


def _scaling(factors) -> np.ndarray:
    return np.diag([*_vec3(factors), 1.0])


def ortho(left: float, right: float, bottom: float, top: float, z_near: float, z_far: float) -> np.ndarray:
    """Right-handed orthographic projection onto the -1..1 cube."""
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (z_far - z_near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(z_far + z_near) / (z_far - z_near)
    return matrix


def model_matrix(position, scale=(1.0, 1.0, 1.0), rotation: float = 0.0) -> np.ndarray:
    """Translate, then rotate about z by ``rotation`` degrees, then scale."""
    return _translation(position) @ _rotation_z(rotation) @ _scaling(scale)


class Camera:
    """An orthographic camera showing ``size`` world units vertically."""

    def __init__(self, viewport: Viewport) -> None:
        self.position = np.zeros(3)
        self.rotation = 0.0
        self.size = 5.0
        self.z_near = 1.0
        self.z_far = 100.0
        self.viewport = viewport
        self.update()

    def set_viewport(self, viewport: Viewport) -> None:
        self.viewport = viewport

    def update(self) -> None:
        """Recompute the view, projection and combined matrices."""
        self.view = _rotation_z(-self.rotation) @ _translation(-_vec3(self.position))
        half_width = self.size * self.viewport.aspect_ratio / 2.0
        half_height = self.size / 2.0
        self.projection = ortho(-half_width, half_width, -half_height, half_height, self.z_near, self.z_far)
        self.combined = self.projection @ self.view