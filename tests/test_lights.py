"""Tests for light sources.

Tests cover:
- Point light shadow rays, attenuation and occlusion distance
- Directional light constant intensity and occlusion
- Spot light cone falloff
"""

import math

import numpy as np
import pytest


class TestPointLight:
    """Tests for PointLight."""

    def test_ray_to_light(self):
        from whitted.core.vector import vec3
        from whitted.lights.point import PointLight

        light = PointLight(position=(0, 5, 0))
        ray = light.ray_to_light(vec3(0, 1, 0))

        assert np.allclose(ray.origin, [0, 1, 0])
        assert np.allclose(ray.unit_direction, [0, 1, 0])

    def test_no_attenuation_by_default(self):
        from whitted.core.vector import vec3
        from whitted.lights.point import PointLight

        light = PointLight(position=(0, 5, 0), intensity=(0.5, 0.6, 0.7))
        point = vec3(0, 0, 0)
        assert np.allclose(light.intensity(point, light.ray_to_light(point)), [0.5, 0.6, 0.7])

    def test_attenuation(self):
        """Test I / (kc + kl d + kq d^2)."""
        from whitted.core.vector import vec3
        from whitted.lights.point import PointLight

        light = PointLight(position=(0, 2, 0), intensity=(1, 1, 1), kc=1.0, kl=0.5, kq=0.25)
        point = vec3(0, 0, 0)
        # d = 2 -> 1 + 1 + 1 = 3
        expected = 1.0 / 3.0
        assert np.allclose(light.intensity(point, light.ray_to_light(point)), expected)

    def test_rejects_all_zero_attenuation(self):
        from whitted.lights.point import PointLight

        with pytest.raises(ValueError, match="Attenuation"):
            PointLight(position=(0, 0, 0), kc=0.0)

    def test_occluded_by_surface_in_between(self):
        from whitted.core.vector import vec3
        from whitted.geometry.sphere import Sphere
        from whitted.lights.point import PointLight

        light = PointLight(position=(0, 10, 0))
        blocker = Sphere(center=(0, 5, 0), radius=1.0)
        ray = light.ray_to_light(vec3(0, 0, 0))

        assert light.is_occluded_by(blocker, ray)

    def test_not_occluded_by_surface_beyond_light(self):
        """Test a surface behind the light does not cast a shadow."""
        from whitted.core.vector import vec3
        from whitted.geometry.sphere import Sphere
        from whitted.lights.point import PointLight

        light = PointLight(position=(0, 3, 0))
        beyond = Sphere(center=(0, 6, 0), radius=1.0)
        ray = light.ray_to_light(vec3(0, 0, 0))

        assert not light.is_occluded_by(beyond, ray)

    def test_not_occluded_by_missed_surface(self):
        from whitted.core.vector import vec3
        from whitted.geometry.sphere import Sphere
        from whitted.lights.point import PointLight

        light = PointLight(position=(0, 10, 0))
        aside = Sphere(center=(5, 5, 0), radius=1.0)

        assert not light.is_occluded_by(aside, light.ray_to_light(vec3(0, 0, 0)))


class TestDirectionalLight:
    """Tests for DirectionalLight."""

    def test_ray_points_against_light_direction(self):
        from whitted.core.vector import vec3
        from whitted.lights.directional import DirectionalLight

        light = DirectionalLight(direction=(0, -2, 0))
        ray = light.ray_to_light(vec3(1, 2, 3))

        assert np.allclose(ray.origin, [1, 2, 3])
        assert np.allclose(ray.unit_direction, [0, 1, 0])

    def test_constant_intensity(self):
        from whitted.core.vector import vec3
        from whitted.lights.directional import DirectionalLight

        light = DirectionalLight(direction=(0, -1, 0), intensity=(0.3, 0.3, 0.3))
        for point in (vec3(0, 0, 0), vec3(100, -50, 7)):
            assert np.allclose(light.intensity(point, light.ray_to_light(point)), 0.3)

    def test_occluded_by_any_hit(self):
        """Test any surface along the ray blocks a light at infinity."""
        from whitted.core.vector import vec3
        from whitted.geometry.sphere import Sphere
        from whitted.lights.directional import DirectionalLight

        light = DirectionalLight(direction=(0, -1, 0))
        far_blocker = Sphere(center=(0, 1000, 0), radius=1.0)

        assert light.is_occluded_by(far_blocker, light.ray_to_light(vec3(0, 0, 0)))

    def test_rejects_zero_direction(self):
        from whitted.lights.directional import DirectionalLight

        with pytest.raises(ValueError, match="non-zero"):
            DirectionalLight(direction=(0, 0, 0))


class TestSpotLight:
    """Tests for SpotLight."""

    def test_on_axis_full_intensity(self):
        from whitted.core.vector import vec3
        from whitted.lights.spot import SpotLight

        light = SpotLight(position=(0, 5, 0), direction=(0, -1, 0), intensity=(1, 1, 1))
        point = vec3(0, 0, 0)
        assert np.allclose(light.intensity(point, light.ray_to_light(point)), 1.0)

    def test_off_axis_cosine_falloff(self):
        from whitted.core.vector import vec3
        from whitted.lights.spot import SpotLight

        light = SpotLight(position=(0, 1, 0), direction=(0, -1, 0), intensity=(1, 1, 1))
        point = vec3(1, 0, 0)
        # 45 degrees off axis, no distance attenuation
        expected = math.cos(math.radians(45.0))
        assert np.allclose(light.intensity(point, light.ray_to_light(point)), expected)

    def test_behind_spot_is_dark(self):
        from whitted.core.vector import vec3
        from whitted.lights.spot import SpotLight

        light = SpotLight(position=(0, 0, 0), direction=(0, -1, 0))
        point = vec3(0, 3, 0)
        assert np.allclose(light.intensity(point, light.ray_to_light(point)), 0.0)
