"""Light contract.

Every light answers three questions about a world-space point:

- ray_to_light(point): the shadow ray from the point toward the light
- intensity(point, ray): the RGB intensity arriving at the point along ray
- is_occluded_by(surface, ray): whether surface blocks that shadow ray

The integrator only calls these three methods, so new light types need no
changes elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from whitted.core.ray import Ray
from whitted.core.vector import Vec3, VectorLike, as_vec3

if TYPE_CHECKING:
    from whitted.geometry.surface import Surface


class Light(ABC):
    """Abstract base class for light sources.

    Attributes:
        color: Base RGB intensity of the light.
    """

    def __init__(self, intensity: VectorLike = (1.0, 1.0, 1.0)) -> None:
        self.color = as_vec3(intensity)

    @abstractmethod
    def ray_to_light(self, point: Vec3) -> Ray:
        """Ray leaving point in the direction of the light."""

    @abstractmethod
    def intensity(self, point: Vec3, ray: Ray) -> Vec3:
        """Intensity of the light arriving at point along ray."""

    @abstractmethod
    def is_occluded_by(self, surface: Surface, ray: Ray) -> bool:
        """Whether surface blocks ray before it reaches the light."""
