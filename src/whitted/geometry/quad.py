"""Quad primitive with ray-quad intersection.

A quad is defined by:
- corner (Q): A corner point of the quad
- edge_u (u): Edge vector from Q to adjacent corner
- edge_v (v): Edge vector from Q to other adjacent corner

The quad spans the parallelogram from Q to Q+u+v. Its normal is
normalize(cross(u, v)), following the right-hand rule.

Ray-quad intersection uses the parametric plane test:
1. Find where the ray intersects the plane containing the quad
2. Check if the intersection point lies within the quad bounds

A quad has no interior, so hits are never reported with ``within=True``.
Hits on the back side carry the normal flipped toward the ray origin.

Example:
    >>> from whitted.geometry.quad import Quad
    >>> # Floor quad at y=0, spanning x=[0,1] and z=[0,1]
    >>> floor = Quad(corner=(0, 0, 0), edge_u=(0, 0, 1), edge_v=(1, 0, 0))
"""

from __future__ import annotations

from whitted.core.ray import EPSILON, Hit, Ray
from whitted.core.vector import (
    VectorLike,
    as_vec3,
    cross,
    dot,
    length,
    length_squared,
    normalize,
)
from whitted.geometry.surface import Surface
from whitted.materials.phong import Material


class Quad(Surface):
    """A parallelogram defined by a corner point and two edge vectors.

    Attributes:
        corner: The corner point Q.
        edge_u: Edge vector from Q to adjacent corner.
        edge_v: Edge vector from Q to other adjacent corner.
        normal: Unit normal, normalize(edge_u x edge_v).
    """

    def __init__(
        self,
        corner: VectorLike,
        edge_u: VectorLike,
        edge_v: VectorLike,
        material: Material | None = None,
    ) -> None:
        super().__init__(material)
        self.corner = as_vec3(corner)
        self.edge_u = as_vec3(edge_u)
        self.edge_v = as_vec3(edge_v)

        n = cross(self.edge_u, self.edge_v)
        n_dot_n = length_squared(n)
        if n_dot_n < 1e-12:
            raise ValueError("Quad edges must not be parallel or zero-length")

        self.normal = normalize(n)
        # Plane equation: dot(normal, P) = d
        self._d = dot(self.normal, self.corner)
        # w_u . u = 1, w_u . v = 0 and w_v . u = 0, w_v . v = 1
        self._w_u = cross(self.edge_v, n) / n_dot_n
        self._w_v = cross(n, self.edge_u) / n_dot_n

    @property
    def area(self) -> float:
        """Area of the parallelogram, |u x v|."""
        return length(cross(self.edge_u, self.edge_v))

    def intersect(self, ray: Ray) -> Hit | None:
        direction = ray.unit_direction
        denom = dot(self.normal, direction)

        # Parallel to the plane
        if abs(denom) < 1e-8:
            return None

        t = (self._d - dot(self.normal, ray.origin)) / denom
        if t <= EPSILON:
            return None

        p_minus_q = ray.origin + t * direction - self.corner
        alpha = dot(self._w_u, p_minus_q)
        beta = dot(self._w_v, p_minus_q)
        if not (0.0 <= alpha <= 1.0 and 0.0 <= beta <= 1.0):
            return None

        normal = -self.normal if denom > 0.0 else self.normal
        return Hit(t=t, normal=normal, surface=self)

    def __repr__(self) -> str:
        return (
            f"Quad(corner={self.corner.tolist()}, edge_u={self.edge_u.tolist()}, "
            f"edge_v={self.edge_v.tolist()})"
        )
