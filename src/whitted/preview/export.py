"""Image export utilities for rendered rasters.

This module converts the renderer's linear float colors into 8-bit pixels
and writes them to disk.

Supported formats:
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from whitted.preview.export import save_png
    >>> image = renderer.render(320, 240, math.radians(60))
    >>> save_png(image, "showcase.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.core.vector import VectorLike, as_vec3
from whitted.preview.display import ToneMapMethod, process_image_for_display


def color_to_pixel(color: VectorLike) -> tuple[int, int, int]:
    """Convert one linear color to an 8-bit RGB triple.

    Each channel is clamped to [0, 1], scaled by 255 and truncated.
    """
    rgb = np.clip(as_vec3(color), 0.0, 1.0)
    r, g, b = (rgb * 255).astype(np.uint8).tolist()
    return r, g, b


def image_to_uint8(
    image: npt.NDArray[np.float64],
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a linear float raster to uint8 for display/export.

    Args:
        image: Linear image array of shape (H, W, 3).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma correction value (default 1.0, none).
        exposure: Exposure value for exposure tone mapping.

    Returns:
        8-bit image array of shape (H, W, 3).
    """
    processed = process_image_for_display(
        image,
        tone_map=tone_map,
        gamma=gamma,
        exposure=exposure,
    )
    return (processed * 255).astype(np.uint8)


def save_png(
    image: npt.NDArray[np.float64],
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> Path:
    """Save a rendered raster as a PNG file.

    Args:
        image: Linear image array of shape (H, W, 3).
        filepath: Output file path (should end in .png).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma correction value (default 1.0, none).
        exposure: Exposure value for exposure tone mapping.

    Returns:
        The path written to.
    """
    path = Path(filepath)
    image_uint8 = image_to_uint8(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    PILImage.fromarray(image_uint8).save(path)
    return path
