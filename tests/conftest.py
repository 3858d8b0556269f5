"""Pytest configuration for raytracer tests.

This module provides shared fixtures: a camera looking down -Z from the
origin, a few materials, and a helper to build scenes around them.
"""

import pytest


@pytest.fixture
def camera():
    """Camera at the origin looking toward -Z with Y up."""
    from whitted.camera.pinhole import PinholeCamera

    return PinholeCamera(
        position=(0.0, 0.0, 0.0),
        towards=(0.0, 0.0, -1.0),
        up=(0.0, 1.0, 0.0),
        distance_to_plane=1.0,
    )


@pytest.fixture
def diffuse_material():
    """Diffuse material with a weak highlight and no ambient or reflection."""
    from whitted.materials.phong import Material

    return Material(
        ka=(0.0, 0.0, 0.0),
        kd=(0.5, 0.5, 0.5),
        ks=(0.2, 0.2, 0.2),
        shininess=10.0,
        reflection_intensity=0.0,
    )


@pytest.fixture
def mirror_material():
    """Mirror-like material: no local shading except ambient, strong reflection."""
    from whitted.materials.phong import Material

    return Material(
        ka=(0.1, 0.1, 0.1),
        kd=(0.0, 0.0, 0.0),
        ks=(0.0, 0.0, 0.0),
        shininess=1.0,
        reflection_intensity=0.8,
    )


@pytest.fixture
def make_scene(camera):
    """Factory building a frozen scene around the shared camera.

    Keyword arguments are forwarded to SceneConfig.
    """
    from whitted.scene.config import SceneConfig

    def _make(**kwargs):
        kwargs.setdefault("camera", camera)
        return SceneConfig(**kwargs)

    return _make
