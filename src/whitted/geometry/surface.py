"""Surface contract shared by every intersectable primitive.

A surface answers one question: given a ray, where is the nearest
intersection that lies more than EPSILON ahead of the ray origin? The answer
is a Hit (bound to the surface) or None. When the ray origin lies inside a
closed surface, the hit is reported with ``within=True`` instead of being
treated identically to an exterior hit.

Shading properties are delegated to the surface's Material so that the
integrator only ever talks to surfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from whitted.core.ray import Hit, Ray
from whitted.core.vector import Vec3
from whitted.materials.phong import Material


class Surface(ABC):
    """Abstract base class for intersectable primitives.

    Attributes:
        material: Phong material used to shade hits on this surface.
    """

    def __init__(self, material: Material | None = None) -> None:
        self.material = material if material is not None else Material()

    @abstractmethod
    def intersect(self, ray: Ray) -> Hit | None:
        """Find the nearest intersection ahead of the ray origin.

        Args:
            ray: The ray to test. Its direction need not be normalized.

        Returns:
            A Hit bound to this surface with t > EPSILON, or None.
        """

    @property
    def ka(self) -> Vec3:
        return self.material.ka

    @property
    def kd(self) -> Vec3:
        return self.material.kd

    @property
    def ks(self) -> Vec3:
        return self.material.ks

    @property
    def shininess(self) -> float:
        return self.material.shininess

    @property
    def reflection_intensity(self) -> float:
        return self.material.reflection_intensity

    @property
    def transparent(self) -> bool:
        return self.material.transparent

    def n1(self, hit: Hit) -> float:
        """Refractive index on the incident side of hit."""
        return self.material.n1(hit)

    def n2(self, hit: Hit) -> float:
        """Refractive index on the transmitted side of hit."""
        return self.material.n2(hit)
