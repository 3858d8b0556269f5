"""Geometry module for intersectable primitives.

Components:
    surface: The Surface contract every primitive implements
    sphere: Sphere primitive with stable ray-sphere intersection
    quad: Parallelogram primitive with ray-quad intersection

Intersection follows the pattern:
    hit = surface.intersect(ray)  # Hit with t > EPSILON, or None
"""

from .quad import Quad
from .sphere import Sphere
from .surface import Surface

__all__ = [
    "Surface",
    "Sphere",
    "Quad",
]
