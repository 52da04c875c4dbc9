#!/usr/bin/env python3
"""Render one of the built-in scenes to a PNG file.

Usage:
    python -m examples.render_scene [options]

Options:
    --scene NAME        Scene to render: showcase or default (default: showcase)
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 200)
    --fov DEGREES       Field of view in degrees (default: 60)
    --workers N         Number of render workers (default: CPU count)
    --backend NAME      Worker backend: thread or process (default: process)
    --depth DEPTH       Reflection/refraction recursion depth (default: 6)
    --output OUTPUT     Output file path (default: render.png)
    --log-level LEVEL   Logging level (default: WARNING)
    --quiet             Suppress progress output

Example:
    python -m examples.render_scene --width 640 --height 360 --workers 8
"""

from __future__ import annotations

import argparse
import math
import os
import sys
import time
from pathlib import Path

from src.whitted.camera.camera import Camera
from src.whitted.core.renderer import RenderSettings, render_parallel
from src.whitted.core.transformations import view_transform
from src.whitted.core.tuples import point, vector
from src.whitted.logging_config import setup_logging
from src.whitted.preview.export import save_png
from src.whitted.scene.scenes import ShowcaseParams, create_showcase_scene, default_world
from src.whitted.scene.world import MAX_REFLECTIONS

SCENES = ("showcase", "default")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a built-in scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--scene", choices=SCENES, default="showcase", help="Scene to render (default: showcase)")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels (default: 400)")
    parser.add_argument("--height", type=int, default=200, help="Image height in pixels (default: 200)")
    parser.add_argument("--fov", type=float, default=60.0, help="Field of view in degrees (default: 60)")
    parser.add_argument(
        "--workers",
        type=int,
        default=os.cpu_count() or 1,
        help="Number of render workers (default: CPU count)",
    )
    parser.add_argument(
        "--backend",
        choices=("thread", "process"),
        default="process",
        help="Worker backend (default: process)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=MAX_REFLECTIONS,
        help=f"Reflection/refraction recursion depth (default: {MAX_REFLECTIONS})",
    )
    parser.add_argument("--output", type=str, default="render.png", help="Output file path (default: render.png)")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args(argv)


def render_scene(
    scene: str = "showcase",
    width: int = 400,
    height: int = 200,
    fov_degrees: float = 60.0,
    settings: RenderSettings | None = None,
    output_path: str = "render.png",
    quiet: bool = False,
) -> Path:
    """Render a built-in scene and save it as PNG.

    Args:
        scene: Scene name, "showcase" or "default".
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Field of view in degrees.
        settings: Worker configuration.
        output_path: Output file path.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    field_of_view = math.radians(fov_degrees)
    if scene == "showcase":
        world, camera = create_showcase_scene(width, height, ShowcaseParams(field_of_view=field_of_view))
    else:
        world = default_world()
        camera = Camera(
            width,
            height,
            field_of_view,
            view_transform(point(0, 1.5, -5), point(0, 0, 0), vector(0, 1, 0)),
        )

    if not quiet:
        print(f"Rendering {scene} scene ({width}x{height})...")

    start_time = time.time()

    def progress_callback(completed: int, total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (completed / total) * 100 if total > 0 else 0
            pixels_per_sec = completed / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {completed}/{total} pixels "
                f"({progress_pct:.1f}%) - {pixels_per_sec:.0f} px/s",
                end="",
                flush=True,
            )

    canvas = render_parallel(camera, world, settings, callback=progress_callback)

    if not quiet:
        print()

    output_file = Path(output_path)
    save_png(canvas, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = RenderSettings(max_depth=args.depth, workers=args.workers, backend=args.backend)
        render_scene(
            scene=args.scene,
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            settings=settings,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
