#!/usr/bin/env python3
"""Render the showcase scene.

This script demonstrates end-to-end rendering of the showcase scene: it
builds the scene, renders it on a thread pool and writes a PNG.

Usage:
    python -m examples.render_showcase [options]

Options:
    --width WIDTH         Image width in pixels (default: 320)
    --height HEIGHT       Image height in pixels (default: 240)
    --fov DEGREES         Horizontal field of view in degrees (default: 60)
    --aa FACTOR           Antialiasing factor 1-3 (default: 1)
    --depth LEVEL         Maximum recursion level (default: 4)
    --no-reflections      Disable reflected rays
    --no-refractions      Disable refracted rays
    --workers N           Render threads (default: CPU count, at least 2)
    --output OUTPUT       Output file path (default: showcase.png)
    --quiet               Suppress progress output

Example:
    python -m examples.render_showcase --width 160 --height 120 --aa 2
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from pathlib import Path

logger = logging.getLogger("render_showcase")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the showcase scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=320,
        help="Image width in pixels (default: 320)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=240,
        help="Image height in pixels (default: 240)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=60.0,
        help="Horizontal field of view in degrees (default: 60)",
    )
    parser.add_argument(
        "--aa",
        type=int,
        default=1,
        choices=(1, 2, 3),
        help="Antialiasing factor (default: 1)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=4,
        help="Maximum recursion level (default: 4)",
    )
    parser.add_argument(
        "--no-reflections",
        action="store_true",
        help="Disable reflected rays",
    )
    parser.add_argument(
        "--no-refractions",
        action="store_true",
        help="Disable refracted rays",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Render threads (default: CPU count, at least 2)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="showcase.png",
        help="Output file path (default: showcase.png)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_showcase(
    width: int = 320,
    height: int = 240,
    fov_degrees: float = 60.0,
    antialiasing_factor: int = 1,
    max_recursion_level: int = 4,
    reflections: bool = True,
    refractions: bool = True,
    workers: int | None = None,
    output_path: str = "showcase.png",
) -> Path:
    """Render the showcase scene and save it to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Horizontal field of view in degrees.
        antialiasing_factor: Linear supersampling density (1-3).
        max_recursion_level: Bounce limit.
        reflections: Whether reflected rays are traced.
        refractions: Whether refracted rays are traced.
        workers: Number of render threads, or None for the default.
        output_path: Output file path (PNG).

    Returns:
        Path to the saved image file.
    """
    from whitted.core.renderer import Renderer
    from whitted.preview.export import save_png
    from whitted.scene.showcase import ShowcaseParams, create_showcase_scene

    params = ShowcaseParams(
        max_recursion_level=max_recursion_level,
        antialiasing_factor=antialiasing_factor,
        render_reflections=reflections,
        render_refractions=refractions,
    )
    scene = create_showcase_scene(params)
    logger.info("Created showcase scene (%dx%d)", width, height)

    renderer = Renderer(scene, logger=logger.info, max_workers=workers)
    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if current % max(1, target // 10) == 0 or current == target:
            elapsed = time.time() - start_time
            logger.info(
                "Progress: %d/%d rows (%.1f%%) - %.2fs",
                current,
                target,
                100.0 * current / target,
                elapsed,
            )

    image = renderer.render(width, height, math.radians(fov_degrees), callback=progress_callback)

    output_file = save_png(image, output_path)
    logger.info("Saved to: %s", output_file.absolute())
    logger.info("Total time: %.2fs", time.time() - start_time)
    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        render_showcase(
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            antialiasing_factor=args.aa,
            max_recursion_level=args.depth,
            reflections=not args.no_reflections,
            refractions=not args.no_refractions,
            workers=args.workers,
            output_path=args.output,
        )
        return 0
    except Exception:
        logger.exception("Rendering failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
