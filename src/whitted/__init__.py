"""Whitted-style recursive ray tracer.

This package renders a scene of surfaces, materials and lights into an RGB
raster with recursive ray tracing:
- Pinhole camera with supersampling antialiasing
- Ambient, diffuse and specular (Phong) shading with hard shadows
- Recursive reflection and refraction rays up to a configurable depth
- Per-pixel parallel rendering on a thread pool

Subpackages:
    core: Vector utilities, rays and hits, the integrator and the renderer
    camera: Pinhole camera model with primary ray generation
    geometry: The Surface contract and its primitives (sphere, quad)
    materials: Phong material model
    lights: The Light contract and point, directional and spot lights
    scene: Frozen scene configuration, its builder and a showcase scene
    preview: Display pipeline and PNG export
"""

__version__ = "0.1.0"
