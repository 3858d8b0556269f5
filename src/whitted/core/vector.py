"""Vector utilities for CPU ray tracing.

Vectors, points and colors are all plain NumPy arrays of shape (3,) with
dtype float64. The helpers here are thin wrappers that keep the shading and
intersection code readable and make the conventions (normalization of zero
vectors, reflection direction, Snell refraction) explicit in one place.

Example:
    >>> from whitted.core.vector import vec3, reflect
    >>> incident = vec3(1.0, -1.0, 0.0)
    >>> normal = vec3(0.0, 1.0, 0.0)
    >>> reflect(incident, normal)
    array([1., 1., 0.])
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

# Type alias for 3D vectors (points, directions and RGB colors alike)
Vec3 = npt.NDArray[np.float64]

# Anything accepted by vec3()/as_vec3()
VectorLike = Sequence[float] | Vec3


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Vec3:
    """Create a 3D vector.

    Args:
        x: First component.
        y: Second component.
        z: Third component.

    Returns:
        A float64 array of shape (3,).
    """
    return np.array((x, y, z), dtype=np.float64)


def as_vec3(value: VectorLike) -> Vec3:
    """Convert a tuple, list or array into a 3D vector.

    Args:
        value: Any sequence of three numbers.

    Returns:
        A new float64 array of shape (3,).

    Raises:
        ValueError: If value does not have exactly three components.
    """
    result = np.array(value, dtype=np.float64).reshape(-1)
    if result.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {result.shape}")
    return result


def zeros() -> Vec3:
    """Return the zero vector (black)."""
    return np.zeros(3, dtype=np.float64)


def dot(a: Vec3, b: Vec3) -> float:
    """Compute the dot product of two vectors."""
    return float(np.dot(a, b))


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Compute the cross product a x b."""
    return np.cross(a, b)


def length_squared(v: Vec3) -> float:
    """Compute the squared length of a vector.

    Cheaper than length() when only comparing magnitudes.
    """
    return float(np.dot(v, v))


def length(v: Vec3) -> float:
    """Compute the Euclidean length of a vector."""
    return math.sqrt(length_squared(v))


def normalize(v: Vec3) -> Vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v.
        If v is zero-length, returns a zero vector.
    """
    n = length(v)
    if n == 0.0:
        return zeros()
    return v / n


def near_zero(v: Vec3, eps: float = 1e-8) -> bool:
    """Check if a vector is near zero in all components."""
    return bool(np.all(np.abs(v) < eps))


def reflect(incident: Vec3, normal: Vec3) -> Vec3:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector, incident - 2 (incident . n) n.
    """
    return incident - 2.0 * dot(incident, normal) * normal


def refract(incident: Vec3, normal: Vec3, n1: float, n2: float) -> Vec3:
    """Refract an incident vector through a surface using Snell's law.

    The normal may face either side of the surface; it is flipped to oppose
    the incident direction before the transmitted direction is computed.

    Args:
        incident: The incoming direction vector.
        normal: The surface normal (unit length).
        n1: Refractive index of the medium the ray travels in.
        n2: Refractive index of the medium the ray enters.

    Returns:
        The refracted unit direction. On total internal reflection the mirror
        reflection direction is returned instead.
    """
    d = normalize(incident)
    n = normal
    cos_i = -dot(d, n)
    if cos_i < 0.0:
        n = -n
        cos_i = -cos_i

    eta = n1 / n2
    sin2_t = eta * eta * (1.0 - cos_i * cos_i)
    if sin2_t > 1.0:
        return normalize(reflect(d, n))

    cos_t = math.sqrt(1.0 - sin2_t)
    return normalize(eta * d + (eta * cos_i - cos_t) * n)
