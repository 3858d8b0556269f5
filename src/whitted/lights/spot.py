"""Spot light: a point light restricted to a cone of directions."""

from __future__ import annotations

from whitted.core.ray import Ray
from whitted.core.vector import Vec3, VectorLike, as_vec3, dot, near_zero, normalize
from whitted.lights.point import PointLight


class SpotLight(PointLight):
    """A point light whose intensity is scaled by the cosine to its axis.

    Points behind the light (cosine <= 0) receive no light.

    Attributes:
        direction: Unit axis of the spot, pointing away from the light.
    """

    def __init__(
        self,
        position: VectorLike,
        direction: VectorLike = (0.0, -1.0, 0.0),
        intensity: VectorLike = (1.0, 1.0, 1.0),
        kc: float = 1.0,
        kl: float = 0.0,
        kq: float = 0.0,
    ) -> None:
        super().__init__(position, intensity, kc, kl, kq)
        direction = as_vec3(direction)
        if near_zero(direction):
            raise ValueError("SpotLight direction must be non-zero")
        self.direction = normalize(direction)

    def intensity(self, point: Vec3, ray: Ray) -> Vec3:
        cos_gamma = dot(self.direction, -ray.unit_direction)
        if cos_gamma <= 0.0:
            return self.color * 0.0
        return cos_gamma * super().intensity(point, ray)

    def __repr__(self) -> str:
        return (
            f"SpotLight(position={self.position.tolist()}, "
            f"direction={self.direction.tolist()}, intensity={self.color.tolist()})"
        )
