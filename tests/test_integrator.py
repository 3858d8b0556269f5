"""Tests for the recursive shading integrator.

Tests cover:
- Nearest-hit search and distance ties
- Recursion cutoff and background on miss
- Ambient, diffuse and specular terms
- Hard shadows (opaque vs transparent occluders)
- Reflection and refraction contributions
- Antialiasing sample averaging
"""

import math

import numpy as np
import pytest


def _ray(origin, direction):
    from whitted.core.ray import Ray
    from whitted.core.vector import as_vec3

    return Ray(origin=as_vec3(origin), direction=as_vec3(direction))


# Ray from the origin down -Z hits a unit sphere at (0,0,-3) at t=2, point
# (0,0,-2), normal +Z.
FORWARD = ((0, 0, 0), (0, 0, -1))


class TestFindIntersection:
    """Tests for the nearest-hit linear scan."""

    def test_nearest_surface_wins(self):
        from whitted.core.integrator import find_intersection
        from whitted.geometry.sphere import Sphere

        far = Sphere(center=(0, 0, -10), radius=1.0)
        near = Sphere(center=(0, 0, -4), radius=1.0)

        hit = find_intersection((far, near), _ray(*FORWARD))
        assert hit.surface is near
        assert hit.t == pytest.approx(3.0)

    def test_first_listed_wins_tie(self):
        """Test equal distances resolve to the first surface in order."""
        from whitted.core.integrator import find_intersection
        from whitted.geometry.sphere import Sphere

        first = Sphere(center=(0, 0, -4), radius=1.0)
        second = Sphere(center=(0, 0, -4), radius=1.0)

        assert find_intersection((first, second), _ray(*FORWARD)).surface is first
        assert find_intersection((second, first), _ray(*FORWARD)).surface is second

    def test_no_surfaces(self):
        from whitted.core.integrator import find_intersection

        assert find_intersection((), _ray(*FORWARD)) is None


class TestTraceTermination:
    """Tests for recursion cutoff and misses."""

    def test_cutoff_returns_black(self, make_scene):
        """Test the energy cutoff is black, not the background."""
        from whitted.core.integrator import trace

        scene = make_scene(max_recursion_level=2)
        color = trace(scene, _ray(*FORWARD), 2)
        assert np.array_equal(color, [0, 0, 0])

    def test_zero_recursion_level_is_black(self, make_scene):
        from whitted.core.integrator import trace

        scene = make_scene(max_recursion_level=0)
        assert np.array_equal(trace(scene, _ray(*FORWARD), 0), [0, 0, 0])

    def test_miss_returns_background(self, make_scene):
        from whitted.core.integrator import trace

        scene = make_scene(background=(0.2, 0.3, 0.4))
        color = trace(scene, _ray(*FORWARD), 0)
        assert np.allclose(color, [0.2, 0.3, 0.4])

    def test_background_copy_is_writable(self, make_scene):
        """Test the returned color does not alias the frozen background."""
        from whitted.core.integrator import trace

        scene = make_scene()
        color = trace(scene, _ray(*FORWARD), 0)
        color += 1.0
        assert np.allclose(scene.background, [0, 0.5, 1])


class TestLocalShading:
    """Tests for the ambient, diffuse and specular terms."""

    def test_ambient_only(self, make_scene):
        from whitted.core.integrator import trace
        from whitted.geometry.sphere import Sphere
        from whitted.materials.phong import Material

        sphere = Sphere(
            center=(0, 0, -3),
            radius=1.0,
            material=Material(ka=(0.2, 0.4, 0.6), reflection_intensity=0.0),
        )
        scene = make_scene(ambient=(0.5, 0.5, 0.5), surfaces=[sphere])

        assert np.allclose(trace(scene, _ray(*FORWARD), 0), [0.1, 0.2, 0.3])

    def test_head_on_diffuse_and_specular(self, make_scene, diffuse_material):
        """Test a light at the eye gives kd + ks on a head-on hit."""
        from whitted.core.integrator import trace
        from whitted.geometry.sphere import Sphere
        from whitted.lights.point import PointLight

        sphere = Sphere(center=(0, 0, -3), radius=1.0, material=diffuse_material)
        scene = make_scene(surfaces=[sphere], lights=[PointLight(position=(0, 0, 0))])

        # diffuse 0.5 * cos(0) + specular 0.2 * cos(0)^10
        assert np.allclose(trace(scene, _ray(*FORWARD), 0), [0.7, 0.7, 0.7])

    def test_light_behind_surface_contributes_nothing(self, make_scene, diffuse_material):
        from whitted.core.integrator import diffuse_term, specular_term
        from whitted.core.vector import vec3
        from whitted.geometry.sphere import Sphere
        from whitted.lights.point import PointLight

        sphere = Sphere(center=(0, 0, -3), radius=1.0, material=diffuse_material)
        ray = _ray(*FORWARD)
        hit = sphere.intersect(ray)
        point = ray.at(hit.t)
        light = PointLight(position=(0, 0, -10))
        to_light = light.ray_to_light(point)

        assert np.array_equal(diffuse_term(hit, point, light, to_light), vec3(0, 0, 0))
        assert np.array_equal(specular_term(ray, hit, point, light, to_light), vec3(0, 0, 0))

    def test_diffuse_cosine(self, diffuse_material):
        """Test the Lambert term scales with the angle to the light."""
        from whitted.core.integrator import diffuse_term
        from whitted.geometry.quad import Quad
        from whitted.lights.directional import DirectionalLight

        floor = Quad(
            corner=(-1, 0, -1),
            edge_u=(0, 0, 2),
            edge_v=(2, 0, 0),
            material=diffuse_material,
        )
        ray = _ray((0, 1, 0), (0, -1, 0))
        hit = floor.intersect(ray)
        point = ray.at(hit.t)
        # Light arriving 60 degrees from the normal
        light = DirectionalLight(direction=(-math.sin(math.pi / 3), -0.5, 0))
        to_light = light.ray_to_light(point)

        assert np.allclose(diffuse_term(hit, point, light, to_light), 0.5 * 0.5)


class TestShadows:
    """Tests for hard shadows."""

    @staticmethod
    def _scene(make_scene, diffuse_material, occluder_material, with_second_light=True):
        from whitted.geometry.sphere import Sphere
        from whitted.lights.point import PointLight

        target = Sphere(center=(0, 0, -3), radius=1.0, material=diffuse_material)
        # Sits on the segment from the hit point (0,0,-2) to the light at (3,0,1)
        occluder = Sphere(center=(1.5, 0, -0.5), radius=0.3, material=occluder_material)
        lights = [PointLight(position=(0, 0, 0))]
        if with_second_light:
            lights.append(PointLight(position=(3, 0, 1)))
        return make_scene(surfaces=[target, occluder], lights=lights)

    def test_opaque_occluder_blocks_light(self, make_scene, diffuse_material):
        from whitted.core.integrator import trace

        shadowed = self._scene(make_scene, diffuse_material, diffuse_material)
        single = self._scene(
            make_scene, diffuse_material, diffuse_material, with_second_light=False
        )

        color = trace(shadowed, _ray(*FORWARD), 0)
        assert np.allclose(color, trace(single, _ray(*FORWARD), 0))
        assert np.allclose(color, [0.7, 0.7, 0.7])

    def test_transparent_occluder_casts_no_shadow(self, make_scene, diffuse_material):
        from whitted.core.integrator import trace
        from whitted.materials.phong import glass

        lit = self._scene(make_scene, diffuse_material, glass())
        color = trace(lit, _ray(*FORWARD), 0)

        # Second light adds 0.5 * cos(45 deg) of diffuse on top of the first
        assert np.all(color > 0.7 + 0.3)

    def test_is_occluded_skips_transparent(self):
        from whitted.core.integrator import is_occluded
        from whitted.core.vector import vec3
        from whitted.geometry.sphere import Sphere
        from whitted.lights.point import PointLight
        from whitted.materials.phong import glass

        light = PointLight(position=(0, 10, 0))
        ray = light.ray_to_light(vec3(0, 0, 0))
        blocker = Sphere(center=(0, 5, 0), radius=1.0)
        pane = Sphere(center=(0, 5, 0), radius=1.0, material=glass())

        assert is_occluded((blocker,), light, ray)
        assert not is_occluded((pane,), light, ray)


class TestRecursiveRays:
    """Tests for reflection and refraction."""

    def test_reflection_adds_scaled_background(self, make_scene, mirror_material):
        """Test a mirror facing away from everything reflects the background."""
        from whitted.core.integrator import trace
        from whitted.geometry.sphere import Sphere

        sphere = Sphere(center=(0, 0, -3), radius=1.0, material=mirror_material)
        scene = make_scene(
            surfaces=[sphere],
            max_recursion_level=2,
            render_reflections=True,
        )

        # ka * ambient + 0.8 * background
        expected = np.array([0.1, 0.1, 0.1]) + 0.8 * np.array([0.0, 0.5, 1.0])
        assert np.allclose(trace(scene, _ray(*FORWARD), 0), expected)

    def test_single_level_ignores_reflections(self, make_scene, mirror_material):
        """Test max level 1 matches a render with reflections disabled."""
        from whitted.core.integrator import trace
        from whitted.geometry.sphere import Sphere

        sphere = Sphere(center=(0, 0, -3), radius=1.0, material=mirror_material)
        on = make_scene(surfaces=[sphere], max_recursion_level=1, render_reflections=True)
        off = make_scene(surfaces=[sphere], max_recursion_level=1, render_reflections=False)

        assert np.allclose(trace(on, _ray(*FORWARD), 0), trace(off, _ray(*FORWARD), 0))

    def test_refraction_through_sphere(self, make_scene):
        """Test a head-on ray passes straight through a glass sphere.

        Each refraction is attenuated by reflection_intensity, so two
        interfaces leave 0.5 * 0.5 of the background.
        """
        from whitted.core.integrator import trace
        from whitted.geometry.sphere import Sphere
        from whitted.materials.phong import Material

        clear = Material(
            ka=(0, 0, 0),
            kd=(0, 0, 0),
            ks=(0, 0, 0),
            reflection_intensity=0.5,
            transparent=True,
            refraction_index=1.5,
        )
        sphere = Sphere(center=(0, 0, -3), radius=1.0, material=clear)
        scene = make_scene(
            surfaces=[sphere],
            max_recursion_level=3,
            render_refractions=True,
        )

        expected = 0.25 * np.array([0.0, 0.5, 1.0])
        assert np.allclose(trace(scene, _ray(*FORWARD), 0), expected)

    def test_refraction_skipped_for_opaque(self, make_scene, diffuse_material):
        from whitted.core.integrator import trace
        from whitted.geometry.sphere import Sphere

        sphere = Sphere(center=(0, 0, -3), radius=1.0, material=diffuse_material)
        on = make_scene(surfaces=[sphere], max_recursion_level=3, render_refractions=True)
        off = make_scene(surfaces=[sphere], max_recursion_level=3)

        assert np.allclose(trace(on, _ray(*FORWARD), 0), trace(off, _ray(*FORWARD), 0))


class TestSamplePixel:
    """Tests for per-pixel supersampling."""

    def test_single_sample_is_primary_ray(self, make_scene, diffuse_material, camera):
        from whitted.core.integrator import sample_pixel, trace
        from whitted.geometry.sphere import Sphere
        from whitted.lights.point import PointLight

        sphere = Sphere(center=(0, 0, -3), radius=1.0, material=diffuse_material)
        scene = make_scene(surfaces=[sphere], lights=[PointLight(position=(1, 1, 0))])
        camera.configure_resolution(8, 8, math.pi / 2)

        expected = trace(scene, camera.primary_ray(3, 5), 0)
        assert np.array_equal(sample_pixel(scene, camera, 3, 5), expected)

    def test_supersampling_is_mean_of_grid(self, make_scene, diffuse_material, camera):
        from whitted.core.integrator import sample_pixel, trace
        from whitted.geometry.sphere import Sphere
        from whitted.lights.point import PointLight

        sphere = Sphere(center=(0, 0, -3), radius=1.0, material=diffuse_material)
        scene = make_scene(
            surfaces=[sphere],
            lights=[PointLight(position=(1, 1, 0))],
            antialiasing_factor=3,
        )
        camera.configure_resolution(8, 8, math.pi / 2)

        samples = [
            trace(scene, camera.primary_ray(2 + i / 3, 4 + j / 3), 0)
            for i in range(3)
            for j in range(3)
        ]
        assert np.allclose(sample_pixel(scene, camera, 2, 4), np.mean(samples, axis=0))
