"""Parallel renderer dispatching one unit of work per pixel.

Rendering proceeds in two passes over the pixels, both in row-major order:

1. Submit: one task per pixel is handed to a thread pool. Each task shades
   its pixel (including all antialiasing sub-samples) and returns a color.
2. Collect: the futures are joined in the same order and each color is
   written into its raster cell.

Workers only read the frozen scene and only return values, so the raster is
identical whatever order the threads finish in. If any task raises, the
exception surfaces from Future.result() and render() re-raises it; no
partial image is returned.

Progress milestones are reported through an injected ``logger`` callable,
which defaults to this module's standard-library logger.

Example:
    >>> import math
    >>> from whitted.core.renderer import Renderer
    >>> from whitted.scene.showcase import create_showcase_scene
    >>>
    >>> scene = create_showcase_scene()
    >>> renderer = Renderer(scene)
    >>> image = renderer.render(320, 240, math.radians(60))
    >>> image.shape
    (240, 320, 3)
"""

from __future__ import annotations

import copy
import logging
import math
import os
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

import numpy as np
import numpy.typing as npt

from whitted.camera.pinhole import PinholeCamera
from whitted.core.integrator import sample_pixel
from whitted.core.vector import Vec3
from whitted.scene.config import SceneConfig

logger = logging.getLogger(__name__)

# Reporting collaborator: receives one human-readable message per milestone
Logger = Callable[[str], None]

# Type alias for progress callback
# Callback receives (rows_collected, total_rows)
ProgressCallback = Callable[[int, int], None]

# The pool never runs with fewer threads than this
MIN_WORKERS = 2


def default_worker_count() -> int:
    """Number of render threads: the CPU count, but at least MIN_WORKERS."""
    return max(MIN_WORKERS, os.cpu_count() or 1)


class Renderer:
    """Renders a SceneConfig into a floating-point RGB raster.

    A Renderer may be reused for several sequential renders, but render()
    must not be entered concurrently on the same instance.

    Attributes:
        scene: The frozen scene configuration.
        max_workers: Size of the thread pool created by each render() call.
    """

    def __init__(
        self,
        scene: SceneConfig,
        logger: Logger | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._scene = scene
        self._log = logger if logger is not None else _default_logger
        self._max_workers = max(MIN_WORKERS, max_workers or default_worker_count())
        self._camera: PinholeCamera | None = None
        self._render_lock = threading.Lock()

    @property
    def scene(self) -> SceneConfig:
        return self._scene

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def render_pixel(self, x: int, y: int) -> Vec3:
        """Compute the color of one pixel.

        Only valid while a render is in progress (the camera resolution is
        configured at the start of render()).

        Raises:
            RuntimeError: If called outside render().
        """
        if self._camera is None:
            raise RuntimeError("render_pixel() called outside of render()")
        return sample_pixel(self._scene, self._camera, x, y)

    def render(
        self,
        width: int,
        height: int,
        view_angle: float,
        callback: ProgressCallback | None = None,
    ) -> npt.NDArray[np.float64]:
        """Render the scene.

        Args:
            width: Image width in pixels (positive).
            height: Image height in pixels (positive).
            view_angle: Horizontal field of view in radians, in (0, pi).
            callback: Optional callback called after each row is collected.
                Receives (rows_collected, height).

        Returns:
            Array of shape (height, width, 3), row-major with the top row
            first, holding unclamped linear colors.

        Raises:
            ValueError: If width/height are not positive integers or
                view_angle is out of range. Raised before any ray is shot.
            RuntimeError: If render() is already running on this instance.
            Exception: Whatever a pixel task raised.
        """
        _validate_render_args(width, height, view_angle)

        if not self._render_lock.acquire(blocking=False):
            raise RuntimeError("Renderer.render() is already running on this instance")

        try:
            # The frozen scene keeps its camera untouched; resolution lives on a copy
            camera = copy.copy(self._scene.camera)
            camera.configure_resolution(height, width, view_angle)
            self._camera = camera
            return self._render(width, height, callback)
        finally:
            self._camera = None
            self._render_lock.release()

    def _render(
        self,
        width: int,
        height: int,
        callback: ProgressCallback | None,
    ) -> npt.NDArray[np.float64]:
        name = self._scene.name
        k = self._scene.antialiasing_factor
        image = np.zeros((height, width, 3), dtype=np.float64)

        self._log(f"Initialize executor. Using {self._max_workers} threads to render {name}")
        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="whitted-render"
        ) as executor:
            self._log(f"Starting to shoot {width * height * k * k} rays over {name}")

            futures: list[list[Future[Vec3]]] = [
                [executor.submit(self.render_pixel, x, y) for x in range(width)]
                for y in range(height)
            ]

            self._log("Done shooting rays.")
            self._log("Waiting for results...")

            try:
                for y in range(height):
                    for x in range(width):
                        image[y, x] = futures[y][x].result()
                    if callback is not None:
                        callback(y + 1, height)
            except BaseException:
                for row in futures:
                    for future in row:
                        future.cancel()
                raise

        self._log(f"Ray tracing of {name} has been completed.")
        return image

    def __repr__(self) -> str:
        return f"Renderer(scene={self._scene.name!r}, max_workers={self._max_workers})"


def _default_logger(message: str) -> None:
    logger.info(message)


def _validate_render_args(width: int, height: int, view_angle: float) -> None:
    for label, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"{label} must be an integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"{label} must be positive, got {value}")
    if not 0.0 < view_angle < math.pi:
        raise ValueError(f"view_angle must be in (0, pi) radians, got {view_angle}")
