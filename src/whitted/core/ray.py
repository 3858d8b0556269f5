"""Ray and hit records.

A Ray is an origin point plus a direction. Producers are not required to
normalize the direction; evaluation along the ray (Ray.at) and the
intersection routines normalize it where unit length matters.

A Hit is created fresh by every intersection test, consumed immediately by
the shading step and never retained.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.vector import vec3
    >>> ray = Ray(origin=vec3(0, 0, 0), direction=vec3(0, 0, -2))
    >>> ray.at(5.0)
    array([ 0.,  0., -5.])
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitted.core.vector import Vec3, VectorLike, as_vec3, normalize

if TYPE_CHECKING:
    from whitted.geometry.surface import Surface

# Minimum hit distance; guards against a ray re-intersecting its own origin
EPSILON = 1e-5


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not necessarily unit length.
    """

    origin: Vec3
    direction: Vec3

    @classmethod
    def through(cls, origin: VectorLike, point: VectorLike) -> Ray:
        """Create the ray leaving origin and passing through point.

        The direction is normalized.
        """
        origin = as_vec3(origin)
        return cls(origin=origin, direction=normalize(as_vec3(point) - origin))

    @property
    def unit_direction(self) -> Vec3:
        """The normalized direction."""
        return normalize(self.direction)

    def at(self, t: float) -> Vec3:
        """Compute the point at distance t along the ray.

        Args:
            t: Distance along the normalized direction.

        Returns:
            The point origin + t * normalize(direction).
        """
        return self.origin + t * self.unit_direction


@dataclass(frozen=True, eq=False)
class Hit:
    """Record of a ray-surface intersection.

    Attributes:
        t: Distance along the (normalized) ray, always greater than EPSILON.
        normal: Unit surface normal at the hit point.
        surface: The surface that was hit. Filled in by the surface itself.
        within: True when the ray originated inside the surface. Selects which
            refractive index is the incident one.
    """

    t: float
    normal: Vec3
    surface: Surface | None = None
    within: bool = False
