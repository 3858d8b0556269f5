"""Preview module for output and visualization.

Components:
    display: Tone mapping, gamma and the Matplotlib preview window
    export: Color-to-pixel conversion and PNG export (Pillow)
"""

from whitted.preview.display import (
    ToneMapMethod,
    apply_gamma,
    process_image_for_display,
    show_preview,
    tone_map_exposure,
    tone_map_reinhard,
)
from whitted.preview.export import color_to_pixel, image_to_uint8, save_png

__all__ = [
    "show_preview",
    "tone_map_reinhard",
    "tone_map_exposure",
    "apply_gamma",
    "process_image_for_display",
    "ToneMapMethod",
    "color_to_pixel",
    "image_to_uint8",
    "save_png",
]
