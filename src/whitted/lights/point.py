"""Point light with distance attenuation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from whitted.core.ray import Ray
from whitted.core.vector import Vec3, VectorLike, as_vec3, length
from whitted.lights.base import Light

if TYPE_CHECKING:
    from whitted.geometry.surface import Surface


class PointLight(Light):
    """A light emitting uniformly from a single position.

    The intensity falls off as I / (kc + kl*d + kq*d^2), where d is the
    distance from the light to the shaded point.

    Attributes:
        position: World-space position of the light.
        kc: Constant attenuation.
        kl: Linear attenuation.
        kq: Quadratic attenuation.
    """

    def __init__(
        self,
        position: VectorLike,
        intensity: VectorLike = (1.0, 1.0, 1.0),
        kc: float = 1.0,
        kl: float = 0.0,
        kq: float = 0.0,
    ) -> None:
        super().__init__(intensity)
        if kc < 0 or kl < 0 or kq < 0 or kc + kl + kq == 0:
            raise ValueError(
                f"Attenuation factors must be non-negative and not all zero: "
                f"kc={kc}, kl={kl}, kq={kq}"
            )
        self.position = as_vec3(position)
        self.kc = kc
        self.kl = kl
        self.kq = kq

    def ray_to_light(self, point: Vec3) -> Ray:
        return Ray(origin=point, direction=self.position - point)

    def distance_to(self, point: Vec3) -> float:
        return length(self.position - point)

    def attenuation(self, distance: float) -> float:
        return self.kc + self.kl * distance + self.kq * distance * distance

    def intensity(self, point: Vec3, ray: Ray) -> Vec3:
        return self.color / self.attenuation(self.distance_to(point))

    def is_occluded_by(self, surface: Surface, ray: Ray) -> bool:
        hit = surface.intersect(ray)
        # Only blockers between the point and the light count
        return hit is not None and hit.t < self.distance_to(ray.origin)

    def __repr__(self) -> str:
        return (
            f"PointLight(position={self.position.tolist()}, "
            f"intensity={self.color.tolist()}, kc={self.kc}, kl={self.kl}, kq={self.kq})"
        )
