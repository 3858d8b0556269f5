"""Light sources.

Components:
    base: The Light contract (ray_to_light, intensity, is_occluded_by)
    point: Point light with constant/linear/quadratic attenuation
    directional: Directional light at infinity
    spot: Point light restricted to a cone around an axis
"""

from .base import Light
from .directional import DirectionalLight
from .point import PointLight
from .spot import SpotLight

__all__ = [
    "Light",
    "PointLight",
    "DirectionalLight",
    "SpotLight",
]
