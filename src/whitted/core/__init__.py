"""Core rendering module.

Components:
    vector: NumPy-backed vector utilities (dot, cross, reflect, refract)
    ray: Ray and Hit records, and the EPSILON self-intersection threshold
    integrator: Recursive Whitted shading and per-pixel sampling
    renderer: Thread-pool renderer producing the output raster
"""

from .ray import EPSILON, Hit, Ray
from .vector import (
    Vec3,
    as_vec3,
    cross,
    dot,
    length,
    length_squared,
    near_zero,
    normalize,
    reflect,
    refract,
    vec3,
    zeros,
)

# Note: integrator and renderer are NOT imported here to avoid circular imports.
# Import directly from whitted.core.integrator or whitted.core.renderer when needed.

__all__ = [
    "EPSILON",
    "Hit",
    "Ray",
    "Vec3",
    "vec3",
    "as_vec3",
    "zeros",
    "dot",
    "cross",
    "length",
    "length_squared",
    "normalize",
    "near_zero",
    "reflect",
    "refract",
]
