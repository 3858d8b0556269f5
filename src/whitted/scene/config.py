"""Scene configuration and its fluent builder.

A scene is assembled once through SceneBuilder and frozen into a SceneConfig
before it is handed to the renderer. SceneConfig is a frozen dataclass whose
collections are tuples, so nothing a render worker can reach is mutable
through the config.

Example:
    >>> from whitted.camera.pinhole import PinholeCamera
    >>> from whitted.geometry.sphere import Sphere
    >>> from whitted.lights.point import PointLight
    >>> from whitted.scene.config import SceneBuilder
    >>> scene = (
    ...     SceneBuilder()
    ...     .with_name("single sphere")
    ...     .with_camera(PinholeCamera(position=(0, 0, 0), towards=(0, 0, -1)))
    ...     .with_max_recursion_level(3)
    ...     .add_surface(Sphere(center=(0, 0, -4), radius=1.0))
    ...     .add_light(PointLight(position=(2, 2, 0)))
    ...     .build()
    ... )
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from whitted.camera.pinhole import PinholeCamera
from whitted.core.vector import Vec3, VectorLike, as_vec3
from whitted.geometry.surface import Surface
from whitted.lights.base import Light

# Defaults for scenes that do not override them
DEFAULT_SCENE_NAME = "scene"
DEFAULT_AMBIENT = (1.0, 1.0, 1.0)  # white
DEFAULT_BACKGROUND = (0.0, 0.5, 1.0)  # blue sky
DEFAULT_MAX_RECURSION_LEVEL = 1

# Supported linear supersampling densities
MIN_ANTIALIASING_FACTOR = 1
MAX_ANTIALIASING_FACTOR = 3


def _frozen(value: VectorLike) -> Vec3:
    result = as_vec3(value)
    result.setflags(write=False)
    return result


@dataclass(frozen=True, eq=False)
class SceneConfig:
    """Immutable description of everything the renderer needs.

    Attributes:
        camera: The pinhole camera (its resolution is configured per render
            on a private copy).
        ambient: Global ambient light color.
        background: Color returned for rays that hit nothing.
        max_recursion_level: Number of bounces traced before the energy cutoff.
        antialiasing_factor: Linear supersampling density k (k*k samples per pixel).
        render_reflections: Whether reflected rays are spawned.
        render_refractions: Whether refracted rays are spawned for transparent
            surfaces.
        surfaces: Surfaces in the order they are scanned for intersections.
        lights: Light sources.
        name: Scene name, used in log messages.
    """

    camera: PinholeCamera
    ambient: Vec3 = field(default_factory=lambda: _frozen(DEFAULT_AMBIENT))
    background: Vec3 = field(default_factory=lambda: _frozen(DEFAULT_BACKGROUND))
    max_recursion_level: int = DEFAULT_MAX_RECURSION_LEVEL
    antialiasing_factor: int = MIN_ANTIALIASING_FACTOR
    render_reflections: bool = False
    render_refractions: bool = False
    surfaces: tuple[Surface, ...] = ()
    lights: tuple[Light, ...] = ()
    name: str = DEFAULT_SCENE_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "ambient", _frozen(self.ambient))
        object.__setattr__(self, "background", _frozen(self.background))
        object.__setattr__(self, "surfaces", tuple(self.surfaces))
        object.__setattr__(self, "lights", tuple(self.lights))
        self.validate()

    def validate(self) -> None:
        """Check the configuration is complete and within range.

        Raises:
            ValueError: On a missing camera or an out-of-range parameter.
        """
        if self.camera is None:
            raise ValueError("Scene requires a camera")
        if self.max_recursion_level < 0:
            raise ValueError(
                f"max_recursion_level must be non-negative, got {self.max_recursion_level}"
            )
        if not (
            MIN_ANTIALIASING_FACTOR <= self.antialiasing_factor <= MAX_ANTIALIASING_FACTOR
        ):
            raise ValueError(
                f"antialiasing_factor must be in [{MIN_ANTIALIASING_FACTOR}, "
                f"{MAX_ANTIALIASING_FACTOR}], got {self.antialiasing_factor}"
            )
        if np.any(self.ambient < 0) or np.any(self.background < 0):
            raise ValueError("ambient and background colors must be non-negative")

    def __str__(self) -> str:
        lines = [
            f"Camera: {self.camera!r}",
            f"Ambient: {self.ambient.tolist()}",
            f"Background Color: {self.background.tolist()}",
            f"Max recursion level: {self.max_recursion_level}",
            f"Anti aliasing factor: {self.antialiasing_factor}",
            f"Light sources: {list(self.lights)!r}",
            f"Surfaces: {list(self.surfaces)!r}",
        ]
        return "\n".join(lines)


class SceneBuilder:
    """Fluent builder producing a frozen SceneConfig.

    Every ``with_*`` and ``add_*`` method returns the builder itself.
    """

    def __init__(self) -> None:
        self._name = DEFAULT_SCENE_NAME
        self._camera: PinholeCamera | None = None
        self._ambient: VectorLike = DEFAULT_AMBIENT
        self._background: VectorLike = DEFAULT_BACKGROUND
        self._max_recursion_level = DEFAULT_MAX_RECURSION_LEVEL
        self._antialiasing_factor = MIN_ANTIALIASING_FACTOR
        self._render_reflections = False
        self._render_refractions = False
        self._surfaces: list[Surface] = []
        self._lights: list[Light] = []

    def with_name(self, name: str) -> SceneBuilder:
        self._name = name
        return self

    def with_camera(self, camera: PinholeCamera) -> SceneBuilder:
        self._camera = camera
        return self

    def with_ambient(self, ambient: VectorLike) -> SceneBuilder:
        self._ambient = ambient
        return self

    def with_background(self, background: VectorLike) -> SceneBuilder:
        self._background = background
        return self

    def with_max_recursion_level(self, level: int) -> SceneBuilder:
        self._max_recursion_level = level
        return self

    def with_antialiasing_factor(self, factor: int) -> SceneBuilder:
        self._antialiasing_factor = factor
        return self

    def with_reflections(self, enabled: bool = True) -> SceneBuilder:
        self._render_reflections = enabled
        return self

    def with_refractions(self, enabled: bool = True) -> SceneBuilder:
        self._render_refractions = enabled
        return self

    def add_surface(self, surface: Surface) -> SceneBuilder:
        self._surfaces.append(surface)
        return self

    def add_light(self, light: Light) -> SceneBuilder:
        self._lights.append(light)
        return self

    def build(self) -> SceneConfig:
        """Validate and freeze the configuration.

        Returns:
            A new SceneConfig. The builder can keep being used afterwards;
            later changes do not affect configs already built.

        Raises:
            ValueError: If no camera was set or a parameter is out of range.
        """
        if self._camera is None:
            raise ValueError("Scene requires a camera; call with_camera() first")

        return SceneConfig(
            camera=self._camera,
            ambient=self._ambient,
            background=self._background,
            max_recursion_level=self._max_recursion_level,
            antialiasing_factor=self._antialiasing_factor,
            render_reflections=self._render_reflections,
            render_refractions=self._render_refractions,
            surfaces=tuple(self._surfaces),
            lights=tuple(self._lights),
            name=self._name,
        )
