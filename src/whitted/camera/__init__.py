"""Camera module for view and ray generation.

Components:
    pinhole: Pinhole (perspective) camera model

Camera responsibilities:
    - Build an orthonormal basis from towards/up vectors
    - Derive pixel size from resolution and horizontal view angle
    - Map (fractional) pixel coordinates to world-space points on the image plane
    - Generate primary rays from the eye through those points
"""

from .pinhole import PinholeCamera

__all__ = [
    "PinholeCamera",
]
