"""Display pipeline and Matplotlib preview for rendered rasters.

The renderer produces unclamped linear colors. Before they are shown or
written to disk they go through:

1. Tone mapping (optional; "none" keeps the raw values)
2. Gamma correction (optional; gamma 1.0 keeps linear values)
3. Clamping to [0, 1]

With tone_map="none" and gamma=1.0 the pipeline is a plain clamp, the
straight color-to-pixel conversion.

Example:
    >>> from whitted.preview.display import show_preview
    >>> image = renderer.render(320, 240, math.radians(60))
    >>> show_preview(image, tone_map="reinhard")
"""

from __future__ import annotations

from typing import Literal

import numpy as np
import numpy.typing as npt

# Type alias for tone mapping options
ToneMapMethod = Literal["none", "reinhard", "exposure"]


def tone_map_reinhard(
    image: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    """Apply Reinhard tone mapping: L / (1 + L).

    Args:
        image: Linear image array of shape (H, W, 3).

    Returns:
        Tone mapped image in [0, 1) range.
    """
    image = np.maximum(image, 0.0)
    return image / (1.0 + image)


def tone_map_exposure(
    image: npt.NDArray[np.float64],
    exposure: float = 1.0,
) -> npt.NDArray[np.float64]:
    """Apply exposure-based tone mapping: 1 - exp(-c * exposure).

    Args:
        image: Linear image array of shape (H, W, 3).
        exposure: Exposure value. Higher values brighten the image.

    Returns:
        Tone mapped image in [0, 1) range.
    """
    image = np.maximum(image, 0.0)
    return 1.0 - np.exp(-image * exposure)


def apply_gamma(
    image: npt.NDArray[np.float64],
    gamma: float = 2.2,
) -> npt.NDArray[np.float64]:
    """Apply gamma correction: out = in^(1/gamma).

    Args:
        image: Linear image array. Values are clamped to [0, 1] first.
        gamma: Gamma value (2.2 for sRGB, 1.0 for no correction).

    Returns:
        Gamma corrected image.
    """
    if gamma <= 0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    if gamma == 1.0:
        return image

    image = np.clip(image, 0.0, 1.0)
    return np.power(image, 1.0 / gamma)


def process_image_for_display(
    image: npt.NDArray[np.float64],
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.float64]:
    """Run the full display pipeline on a linear raster.

    Args:
        image: Linear image array of shape (H, W, 3).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma correction value (default 1.0, none).
        exposure: Exposure value for exposure tone mapping.

    Returns:
        Processed image in [0, 1].

    Raises:
        ValueError: On an unknown tone mapping method.
    """
    result = np.asarray(image, dtype=np.float64).copy()

    if tone_map == "reinhard":
        result = tone_map_reinhard(result)
    elif tone_map == "exposure":
        result = tone_map_exposure(result, exposure)
    elif tone_map != "none":
        raise ValueError(f"Unknown tone mapping method: {tone_map}")

    result = apply_gamma(result, gamma)

    return np.clip(result, 0.0, 1.0)


def show_preview(
    image: npt.NDArray[np.float64],
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
):
    """Display a rendered raster as a Matplotlib figure.

    Args:
        image: Linear image array of shape (H, W, 3) from Renderer.render().
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma correction value.
        exposure: Exposure value for exposure tone mapping.
        title: Custom title (default shows the resolution).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.

    Returns:
        The Matplotlib figure.
    """
    import matplotlib.pyplot as plt

    display_image = process_image_for_display(
        image,
        tone_map=tone_map,
        gamma=gamma,
        exposure=exposure,
    )

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")

    if title is None:
        height, width = display_image.shape[:2]
        title = f"Render Preview - {width}x{height}"
        if tone_map != "none":
            title += f" ({tone_map})"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
    return fig
