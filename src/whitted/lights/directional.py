"""Directional light (a light source infinitely far away)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from whitted.core.ray import Ray
from whitted.core.vector import Vec3, VectorLike, as_vec3, near_zero, normalize
from whitted.lights.base import Light

if TYPE_CHECKING:
    from whitted.geometry.surface import Surface


class DirectionalLight(Light):
    """Parallel light travelling along a fixed direction.

    Attributes:
        direction: Unit direction the light travels in (from the light
            toward the scene).
    """

    def __init__(
        self,
        direction: VectorLike = (0.0, -1.0, -1.0),
        intensity: VectorLike = (1.0, 1.0, 1.0),
    ) -> None:
        super().__init__(intensity)
        direction = as_vec3(direction)
        if near_zero(direction):
            raise ValueError("DirectionalLight direction must be non-zero")
        self.direction = normalize(direction)

    def ray_to_light(self, point: Vec3) -> Ray:
        return Ray(origin=point, direction=-self.direction)

    def intensity(self, point: Vec3, ray: Ray) -> Vec3:
        return self.color

    def is_occluded_by(self, surface: Surface, ray: Ray) -> bool:
        return surface.intersect(ray) is not None

    def __repr__(self) -> str:
        return (
            f"DirectionalLight(direction={self.direction.tolist()}, "
            f"intensity={self.color.tolist()})"
        )
