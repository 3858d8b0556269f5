"""Scene module.

Components:
    config: Frozen SceneConfig and the fluent SceneBuilder
    showcase: Factory for a demonstration scene
"""

from .config import (
    DEFAULT_AMBIENT,
    DEFAULT_BACKGROUND,
    MAX_ANTIALIASING_FACTOR,
    MIN_ANTIALIASING_FACTOR,
    SceneBuilder,
    SceneConfig,
)
from .showcase import ShowcaseParams, create_showcase_camera, create_showcase_scene

__all__ = [
    "SceneConfig",
    "SceneBuilder",
    "DEFAULT_AMBIENT",
    "DEFAULT_BACKGROUND",
    "MIN_ANTIALIASING_FACTOR",
    "MAX_ANTIALIASING_FACTOR",
    "ShowcaseParams",
    "create_showcase_camera",
    "create_showcase_scene",
]
