"""Showcase scene configuration.

This module provides a factory for a small demonstration scene exercising
every feature of the integrator:

- A slightly glossy floor and a matte back wall built from quads
- A red matte sphere, a mirror sphere and a glass sphere
- A point light, a directional fill light and a spot light

The coordinate system has Y up; the camera sits on +Z looking toward -Z.

Example:
    >>> from whitted.scene.showcase import ShowcaseParams, create_showcase_scene
    >>> scene = create_showcase_scene(ShowcaseParams(antialiasing_factor=2))
    >>> len(scene.surfaces)
    5
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.camera.pinhole import PinholeCamera
from whitted.geometry.quad import Quad
from whitted.geometry.sphere import Sphere
from whitted.lights.directional import DirectionalLight
from whitted.lights.point import PointLight
from whitted.lights.spot import SpotLight
from whitted.materials.phong import Material, glass, matte, mirror
from whitted.scene.config import SceneBuilder, SceneConfig

# =============================================================================
# Showcase Parameters
# =============================================================================


@dataclass
class ShowcaseParams:
    """Parameters for configuring the showcase scene.

    Attributes:
        max_recursion_level: Bounce limit. Default 4 lets light pass through
            the glass sphere (two refractions) and still reflect once.
        antialiasing_factor: Linear supersampling density (1-3).
        render_reflections: Whether reflected rays are traced.
        render_refractions: Whether refracted rays are traced.
        light_intensity: RGB intensity of the main point light.
        ambient: Global ambient light color.
        background: Color of rays escaping the scene.

    Example:
        >>> params = ShowcaseParams()
        >>> params.max_recursion_level
        4
    """

    max_recursion_level: int = 4
    antialiasing_factor: int = 1
    render_reflections: bool = True
    render_refractions: bool = True
    light_intensity: tuple[float, float, float] = (0.9, 0.9, 0.9)
    ambient: tuple[float, float, float] = (0.2, 0.2, 0.2)
    background: tuple[float, float, float] = (0.0, 0.5, 1.0)


# =============================================================================
# Showcase Constants
# =============================================================================

FLOOR_Y = -1.0
FLOOR_SIZE = 12.0
BACK_WALL_Z = -10.0

FLOOR_COLOR = (0.73, 0.73, 0.73)
WALL_COLOR = (0.12, 0.45, 0.15)
RED_SPHERE_COLOR = (0.65, 0.05, 0.05)

GLASS_REFRACTION_INDEX = 1.5


# =============================================================================
# Showcase Factory
# =============================================================================


def create_showcase_camera() -> PinholeCamera:
    """Camera slightly above the floor looking toward -Z."""
    return PinholeCamera(
        position=(0.0, 0.5, 4.0),
        towards=(0.0, -0.1, -1.0),
        up=(0.0, 1.0, 0.0),
        distance_to_plane=1.0,
    )


def create_showcase_scene(params: ShowcaseParams | None = None) -> SceneConfig:
    """Create the showcase scene.

    Args:
        params: Optional ShowcaseParams. If None, uses default ShowcaseParams().

    Returns:
        A frozen SceneConfig ready to hand to a Renderer.
    """
    if params is None:
        params = ShowcaseParams()

    half = FLOOR_SIZE / 2.0
    floor = Quad(
        corner=(-half, FLOOR_Y, BACK_WALL_Z),
        edge_u=(0.0, 0.0, FLOOR_SIZE + 4.0),
        edge_v=(FLOOR_SIZE, 0.0, 0.0),
        material=Material(
            ka=FLOOR_COLOR,
            kd=FLOOR_COLOR,
            ks=(0.2, 0.2, 0.2),
            shininess=10.0,
            reflection_intensity=0.2,
        ),
    )
    back_wall = Quad(
        corner=(-half, FLOOR_Y, BACK_WALL_Z),
        edge_u=(FLOOR_SIZE, 0.0, 0.0),
        edge_v=(0.0, FLOOR_SIZE, 0.0),
        material=matte(WALL_COLOR),
    )

    builder = (
        SceneBuilder()
        .with_name("showcase")
        .with_camera(create_showcase_camera())
        .with_ambient(params.ambient)
        .with_background(params.background)
        .with_max_recursion_level(params.max_recursion_level)
        .with_antialiasing_factor(params.antialiasing_factor)
        .with_reflections(params.render_reflections)
        .with_refractions(params.render_refractions)
        .add_surface(floor)
        .add_surface(back_wall)
        .add_surface(Sphere(center=(-1.6, -0.2, -5.0), radius=0.8, material=matte(RED_SPHERE_COLOR)))
        .add_surface(Sphere(center=(0.6, 0.0, -6.0), radius=1.0, material=mirror()))
        .add_surface(
            Sphere(
                center=(0.4, -0.55, -3.0),
                radius=0.45,
                material=glass(GLASS_REFRACTION_INDEX),
            )
        )
        .add_light(PointLight(position=(-2.0, 4.0, -1.0), intensity=params.light_intensity, kq=0.01))
        .add_light(DirectionalLight(direction=(1.0, -1.0, -1.0), intensity=(0.3, 0.3, 0.3)))
        .add_light(
            SpotLight(
                position=(2.5, 3.0, -4.0),
                direction=(-0.5, -1.0, -0.3),
                intensity=(0.6, 0.5, 0.3),
                kl=0.05,
            )
        )
    )
    return builder.build()
