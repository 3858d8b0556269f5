"""Pinhole camera model for perspective projection ray generation.

The camera builds an orthonormal, right-handed basis from the view
parameters:
- forward: normalize(towards), the viewing direction
- right: normalize(forward x up_input), pointing right in the image plane
- up: normalize(right x forward), pointing up in the image plane

The caller's up vector does not need to be orthogonal to the viewing
direction; only the plane it spans with ``towards`` matters.

The image plane sits ``distance_to_plane`` in front of the eye. Once the
target resolution and horizontal view angle are known:

    plane_width  = 2 * distance_to_plane * tan(view_angle / 2)
    pixel_size   = plane_width / width
    plane_height = height * pixel_size

so the vertical field of view follows from the aspect ratio implied by the
pixel counts. Pixel (width // 2, height // 2) maps to the plane center; x grows
to the right and y grows downward.

Example:
    >>> import math
    >>> from whitted.camera.pinhole import PinholeCamera
    >>> camera = PinholeCamera(
    ...     position=(0.0, 0.0, 0.0),
    ...     towards=(0.0, 0.0, -1.0),
    ...     up=(0.0, 1.0, 0.0),
    ...     distance_to_plane=1.0,
    ... )
    >>> camera.configure_resolution(height=200, width=200, view_angle=math.pi / 2)
    >>> ray = camera.primary_ray(100, 100)  # Ray through the image center
"""

from __future__ import annotations

import math

from whitted.core.ray import Ray
from whitted.core.vector import (
    Vec3,
    VectorLike,
    as_vec3,
    cross,
    near_zero,
    normalize,
)


class PinholeCamera:
    """A pinhole (perspective) camera.

    Attributes:
        position: Eye position in world space.
        forward: Unit viewing direction.
        right: Unit right vector of the image plane.
        up: Unit up vector of the image plane.
        distance_to_plane: Distance from the eye to the image plane center.
        plane_center: World-space center of the image plane.
    """

    def __init__(
        self,
        position: VectorLike = (0.0, 0.0, 0.0),
        towards: VectorLike = (0.0, 0.0, -1.0),
        up: VectorLike = (0.0, 1.0, 0.0),
        distance_to_plane: float = 1.0,
    ) -> None:
        if distance_to_plane <= 0:
            raise ValueError(f"distance_to_plane must be positive, got {distance_to_plane}")

        towards = as_vec3(towards)
        up = as_vec3(up)
        if near_zero(towards) or near_zero(up):
            raise ValueError("Camera towards and up vectors must be non-zero")
        if near_zero(cross(towards, up)):
            raise ValueError("Camera towards and up vectors must not be parallel")

        self.position = as_vec3(position)
        self.forward = normalize(towards)
        self.right = normalize(cross(self.forward, up))
        self.up = normalize(cross(self.right, self.forward))
        self.distance_to_plane = float(distance_to_plane)
        self.plane_center = self.position + self.forward * self.distance_to_plane

        self._width = 0
        self._height = 0
        self._pixel_size = 0.0
        self._plane_width = 0.0
        self._plane_height = 0.0
        self._mid_x = 0
        self._mid_y = 0

    # =========================================================================
    # Resolution
    # =========================================================================

    def configure_resolution(self, height: int, width: int, view_angle: float) -> None:
        """Set the target resolution and horizontal view angle.

        Args:
            height: Number of pixels in the y direction.
            width: Number of pixels in the x direction.
            view_angle: Horizontal field of view in radians, in (0, pi).

        Raises:
            ValueError: If the resolution is not positive or the view angle is
                out of range.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Resolution must be positive, got {width}x{height}")
        if not 0.0 < view_angle < math.pi:
            raise ValueError(f"view_angle must be in (0, pi) radians, got {view_angle}")

        self._width = int(width)
        self._height = int(height)
        self._plane_width = 2.0 * self.distance_to_plane * math.tan(view_angle / 2.0)
        self._pixel_size = self._plane_width / self._width
        self._plane_height = self._height * self._pixel_size
        self._mid_x = self._width // 2
        self._mid_y = self._height // 2

    @property
    def is_configured(self) -> bool:
        """Whether configure_resolution() has been called."""
        return self._pixel_size > 0.0

    @property
    def pixel_size(self) -> float:
        return self._pixel_size

    @property
    def plane_width(self) -> float:
        return self._plane_width

    @property
    def plane_height(self) -> float:
        return self._plane_height

    @property
    def resolution(self) -> tuple[int, int]:
        """(width, height) in pixels."""
        return self._width, self._height

    # =========================================================================
    # Ray generation
    # =========================================================================

    def pixel_to_world(self, x: float, y: float) -> Vec3:
        """Map (possibly fractional) pixel coordinates to the image plane.

        Args:
            x: Pixel coordinate, left to right.
            y: Pixel coordinate, top to bottom.

        Returns:
            The world-space point on the image plane.

        Raises:
            RuntimeError: If configure_resolution() was never called.
        """
        if not self.is_configured:
            raise RuntimeError(
                "Camera resolution not configured. Call configure_resolution() first."
            )
        offset_right = self.right * ((x - self._mid_x) * self._pixel_size)
        offset_up = self.up * ((y - self._mid_y) * self._pixel_size)
        return self.plane_center + offset_right - offset_up

    def primary_ray(self, x: float, y: float) -> Ray:
        """Ray from the eye through pixel sample (x, y)."""
        return Ray.through(self.position, self.pixel_to_world(x, y))

    def get_camera_info(self) -> dict[str, tuple[float, float, float] | float]:
        """Get current camera state for debugging.

        Returns:
            Dictionary with position, forward, right, up, plane_center and
            pixel_size.
        """
        return {
            "position": tuple(self.position.tolist()),
            "forward": tuple(self.forward.tolist()),
            "right": tuple(self.right.tolist()),
            "up": tuple(self.up.tolist()),
            "plane_center": tuple(self.plane_center.tolist()),
            "pixel_size": self._pixel_size,
        }

    def __repr__(self) -> str:
        return (
            f"PinholeCamera(position={self.position.tolist()}, "
            f"forward={self.forward.tolist()}, up={self.up.tolist()}, "
            f"distance_to_plane={self.distance_to_plane})"
        )
