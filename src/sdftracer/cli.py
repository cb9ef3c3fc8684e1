"""Command-line entry point.

Renders one of the preset scenes and saves it as a PNG:

    trace   path-traced sphere on a ground plane (1080x720, 512 spp)
    march   ray-marched sphere with a spherical cutout (640x480, 2048 spp)

Usage:
    sdftracer {trace,march} [options]

Options:
    --width WIDTH           Image width in pixels
    --height HEIGHT         Image height in pixels
    --samples SAMPLES       Samples per pixel
    --bounces BOUNCES       Maximum bounces per path
    --threads THREADS       Worker process count
    --min-distance DIST     Marching surface threshold
    --max-distance DIST     Marching escape threshold
    --output OUTPUT         Output file path (default: output.png)
    --show                  Display the result with Matplotlib
    --quiet                 Suppress progress output
    --verbose               Enable info logging

Example:
    sdftracer march --width 320 --height 240 --samples 64
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

import taichi as ti

from sdftracer.core.config import RENDER_MODES, RenderConfig


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="sdftracer",
        description="Render a preset scene by path tracing or SDF ray marching.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("mode", choices=RENDER_MODES, help="Light-transport algorithm")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--bounces", type=int, help="Maximum bounces per path")
    parser.add_argument("--threads", type=int, help="Worker process count")
    parser.add_argument("--min-distance", type=float, help="Marching surface threshold")
    parser.add_argument("--max-distance", type=float, help="Marching escape threshold")
    parser.add_argument("--output", type=str, help="Output file path (default: output.png)")
    parser.add_argument("--show", action="store_true", help="Display the result with Matplotlib")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    parser.add_argument("--verbose", action="store_true", help="Enable info logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RenderConfig:
    """Apply command-line overrides to the preset for the chosen mode."""
    return RenderConfig.for_mode(args.mode).with_overrides(
        width=args.width,
        height=args.height,
        samples=args.samples,
        max_bounces=args.bounces,
        thread_count=args.threads,
        min_distance=args.min_distance,
        max_distance=args.max_distance,
        output=args.output,
    )


def render_to_file(config: RenderConfig, quiet: bool = False, show: bool = False) -> Path:
    """Render the preset scene for config.mode and save it.

    Taichi must already be initialized.

    Args:
        config: Render parameters.
        quiet: If True, suppress progress output.
        show: If True, display the result after saving.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports so Taichi is initialized before any field is created
    from sdftracer.core.renderer import ScanlineRenderer
    from sdftracer.preview.export import save_png_from_array
    from sdftracer.scene.presets import create_scene

    objects, camera = create_scene(config.mode, config.aspect)
    renderer = ScanlineRenderer(objects, camera, config)

    def progress_callback(current: int, total: int) -> None:
        if not quiet:
            print(f"\r{(current / total) * 100.0:.3f}%", end="", flush=True)

    start_time = time.time()
    film = renderer.render(callback=progress_callback)
    if not quiet:
        print("\rDone.        ")

    image = film.resolve(config.samples)
    output_file = save_png_from_array(image, config.output)
    if not quiet:
        print(f"Saved {output_file}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    if show:
        from sdftracer.preview.display import show_preview

        show_preview(
            image,
            title=f"{config.mode} - {config.samples} SPP",
        )

    return output_file


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = build_config(args)
        ti.init(arch=ti.cpu)
        render_to_file(config, quiet=args.quiet, show=args.show)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
