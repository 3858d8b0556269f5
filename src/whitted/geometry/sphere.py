"""Sphere primitive with numerically stable ray-sphere intersection.

The ray-sphere intersection is found by solving:
    |o + t * d - center|^2 = radius^2

With a normalized direction d and l = o - center this is the quadratic:
    a*t^2 + b*t + c = 0,  a = d.d,  b = 2 (d.l),  c = l.l - radius^2

The two roots are computed with the stable formulation
    q = -0.5 * (b + sign(b) * sqrt(b^2 - 4ac)),  t1 = q / a,  t2 = c / q
which avoids catastrophic cancellation when b^2 is nearly equal to 4ac.

Root selection:
    - both roots > EPSILON: the nearer one, exterior hit
    - exactly one root > EPSILON: the ray starts inside, interior hit
    - neither: the sphere is behind the ray origin, no hit

The normal always points outward from the center through the hit point,
also for interior hits.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.vector import vec3
    >>> from whitted.geometry.sphere import Sphere
    >>> sphere = Sphere(center=(0, 0, 0), radius=1.0)
    >>> hit = sphere.intersect(Ray(origin=vec3(0, 0, 5), direction=vec3(0, 0, -1)))
    >>> hit.t
    4.0
"""

from __future__ import annotations

import math

from whitted.core.ray import EPSILON, Hit, Ray
from whitted.core.vector import Vec3, VectorLike, as_vec3, dot, normalize
from whitted.geometry.surface import Surface
from whitted.materials.phong import Material


def _solve_quadratic_stable(a: float, b: float, c: float, discriminant: float):
    """Solve a*t^2 + b*t + c = 0 for a strictly positive discriminant.

    Returns:
        Tuple (t1, t2), unordered.
    """
    sqrt_d = math.sqrt(discriminant)
    if b > 0.0:
        q = -0.5 * (b + sqrt_d)
    else:
        q = -0.5 * (b - sqrt_d)
    return q / a, c / q


class Sphere(Surface):
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        material: Phong material of the sphere.
    """

    def __init__(
        self,
        center: VectorLike = (0.0, -0.5, -6.0),
        radius: float = 0.5,
        material: Material | None = None,
    ) -> None:
        super().__init__(material)
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = as_vec3(center)
        self.radius = float(radius)

    def _hit_at(self, origin: Vec3, direction: Vec3, t: float, within: bool = False) -> Hit:
        point = origin + t * direction
        return Hit(t=t, normal=normalize(point - self.center), surface=self, within=within)

    def intersect(self, ray: Ray) -> Hit | None:
        direction = ray.unit_direction
        origin = ray.origin
        l = origin - self.center

        a = dot(direction, direction)
        b = 2.0 * dot(direction, l)
        c = dot(l, l) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c

        if discriminant < 0.0:
            return None

        if discriminant == 0.0:
            t = -b / (2.0 * a)
            if t <= EPSILON:
                return None
            return self._hit_at(origin, direction, t)

        t1, t2 = _solve_quadratic_stable(a, b, c, discriminant)

        if t1 > EPSILON and t2 > EPSILON:
            return self._hit_at(origin, direction, min(t1, t2))
        if t1 > EPSILON:
            return self._hit_at(origin, direction, t1, within=True)
        if t2 > EPSILON:
            return self._hit_at(origin, direction, t2, within=True)
        return None

    def __repr__(self) -> str:
        return f"Sphere(center={self.center.tolist()}, radius={self.radius})"
