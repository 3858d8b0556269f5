"""Whitted-style recursive ray tracing integrator.

This module implements the shading function evaluated for every primary
ray. A ray at recursion level d < max_recursion_level is shaded as:

    color = ambient
          + sum over unoccluded lights of (diffuse + specular)
          + reflection_intensity * trace(reflected ray, d + 1)   [reflections on]
          + reflection_intensity * trace(refracted ray, d + 1)   [refractions on,
                                                                   transparent surface]

Termination rules:
    - level == max_recursion_level: black. This is an energy cutoff, not an
      estimate of the missing light, so the background is NOT returned here.
    - no surface hit: the scene background color.

Shadows are hard: a light is skipped entirely if any non-transparent surface
occludes its shadow ray. Colors are accumulated unclamped; clamping happens
only when converting to pixels (see whitted.preview.export).

All functions read the scene and never modify it, so they are safe to call
from many render threads at once.

Example:
    >>> from whitted.core.integrator import trace
    >>> color = trace(scene, camera.primary_ray(10, 10), 0)
"""

from __future__ import annotations

import math

from whitted.core.ray import Hit, Ray
from whitted.core.vector import Vec3, dot, normalize, reflect, refract, zeros
from whitted.geometry.surface import Surface
from whitted.lights.base import Light
from whitted.scene.config import SceneConfig

# =============================================================================
# Scene queries
# =============================================================================


def find_intersection(surfaces: tuple[Surface, ...], ray: Ray) -> Hit | None:
    """Find the nearest hit across all surfaces with a linear scan.

    A hit replaces the current best only if its distance is strictly
    smaller, so on exactly equal distances the surface listed first wins.

    Args:
        surfaces: Surfaces in scan order.
        ray: The ray to trace.

    Returns:
        The nearest Hit, or None if nothing was hit.
    """
    min_hit = None
    min_t = math.inf
    for surface in surfaces:
        hit = surface.intersect(ray)
        if hit is not None and hit.t < min_t:
            min_hit = hit
            min_t = hit.t
    return min_hit


def is_occluded(surfaces: tuple[Surface, ...], light: Light, ray_to_light: Ray) -> bool:
    """Check whether any opaque surface blocks the shadow ray to light.

    Transparent surfaces never cast shadows.
    """
    for surface in surfaces:
        if not surface.transparent and light.is_occluded_by(surface, ray_to_light):
            return True
    return False


# =============================================================================
# Local illumination terms
# =============================================================================


def ambient_term(surface: Surface, ambient: Vec3) -> Vec3:
    """Ka multiplied componentwise by the scene ambient color."""
    return surface.ka * ambient


def diffuse_term(
    hit: Hit,
    point: Vec3,
    light: Light,
    ray_to_light: Ray,
) -> Vec3:
    """Lambertian term Kd * max(0, L.N) * I_light."""
    cos_theta = dot(ray_to_light.unit_direction, hit.normal)
    if cos_theta <= 0.0:
        return zeros()
    return hit.surface.kd * cos_theta * light.intensity(point, ray_to_light)


def specular_term(
    ray: Ray,
    hit: Hit,
    point: Vec3,
    light: Light,
    ray_to_light: Ray,
) -> Vec3:
    """Phong term Ks * max(0, R.V)^shininess * I_light.

    R is the direction pointing away from the light reflected about the
    normal; V points from the hit point back toward the viewer.
    """
    reflected = reflect(-ray_to_light.unit_direction, hit.normal)
    to_viewer = -ray.unit_direction
    cos_alpha = dot(reflected, to_viewer)
    if cos_alpha <= 0.0:
        return zeros()
    highlight = cos_alpha ** hit.surface.shininess
    return hit.surface.ks * highlight * light.intensity(point, ray_to_light)


# =============================================================================
# Recursive shading
# =============================================================================


def trace(scene: SceneConfig, ray: Ray, level: int) -> Vec3:
    """Compute the color seen along ray.

    Args:
        scene: The frozen scene configuration.
        ray: The ray to shade.
        level: Current recursion level; primary rays start at 0.

    Returns:
        The unclamped RGB color as a float64 array.
    """
    if level >= scene.max_recursion_level:
        return zeros()

    hit = find_intersection(scene.surfaces, ray)
    if hit is None:
        return scene.background.copy()

    surface = hit.surface
    point = ray.at(hit.t)
    color = ambient_term(surface, scene.ambient)

    for light in scene.lights:
        ray_to_light = light.ray_to_light(point)
        if is_occluded(scene.surfaces, light, ray_to_light):
            continue
        color = color + diffuse_term(hit, point, light, ray_to_light)
        color = color + specular_term(ray, hit, point, light, ray_to_light)

    if scene.render_reflections:
        direction = normalize(reflect(ray.unit_direction, hit.normal))
        reflected = Ray(origin=point, direction=direction)
        color = color + trace(scene, reflected, level + 1) * surface.reflection_intensity

    if scene.render_refractions and surface.transparent:
        direction = refract(ray.unit_direction, hit.normal, surface.n1(hit), surface.n2(hit))
        refracted = Ray(origin=point, direction=direction)
        color = color + trace(scene, refracted, level + 1) * surface.reflection_intensity

    return color


def sample_pixel(scene: SceneConfig, camera, x: int, y: int) -> Vec3:
    """Compute the final color of pixel (x, y).

    With an antialiasing factor k > 1 the pixel is split into a k x k grid of
    samples at (x + i/k, y + j/k) for i, j in [0, k); the result is their
    arithmetic mean. All samples are traced sequentially by the caller's
    thread.

    Args:
        scene: The frozen scene configuration.
        camera: A PinholeCamera with its resolution configured.
        x: Pixel column.
        y: Pixel row (0 is the top row).

    Returns:
        The unclamped RGB color of the pixel.
    """
    k = scene.antialiasing_factor
    if k == 1:
        return trace(scene, camera.primary_ray(x, y), 0)

    total = zeros()
    for i in range(k):
        for j in range(k):
            ray = camera.primary_ray(x + i / k, y + j / k)
            total = total + trace(scene, ray, 0)
    return total / (k * k)
