#!/usr/bin/env python3
"""Render the sphere-and-three-lights scene.

This script renders the fixed scene (one unit sphere lit by a red, a green
and a blue point light) at 640x480 and saves it as an RGBA PNG.

Usage:
    python -m examples.render_three_lights [options]

Options:
    --output OUTPUT     Output file path (default: output.png)
    --arch {cpu,gpu}    Taichi backend (default: cpu)
    --show              Open a Matplotlib preview after rendering
    --quiet             Suppress progress output

Example:
    python -m examples.render_three_lights --output spheres.png
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import taichi as ti

ARCHS = {"cpu": ti.cpu, "gpu": ti.gpu}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a sphere lit by three coloured point lights.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--output",
        type=str,
        default="output.png",
        help="Output file path (default: output.png)",
    )
    parser.add_argument(
        "--arch",
        choices=sorted(ARCHS),
        default="cpu",
        help="Taichi backend; must support 64-bit floats (default: cpu)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open a Matplotlib preview after rendering",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_three_lights(
    output_path: str = "output.png",
    show: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the three-light scene and save to file.

    Args:
        output_path: Output file path (PNG).
        show: If True, open a preview window after saving.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from raycaster.core.render import Renderer
    from raycaster.preview.display import show_preview
    from raycaster.preview.export import save_png
    from raycaster.scene.three_lights import create_three_lights_scene

    scene, settings = create_three_lights_scene()

    if not quiet:
        print(f"Rendering {scene!r} at {settings.width}x{settings.height}...")

    start_time = time.time()
    pixels = Renderer(scene, settings).render()

    output_file = Path(output_path)
    save_png(pixels, settings.width, settings.height, str(output_file))

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    if show:
        show_preview(pixels, settings.width, settings.height)

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    from raycaster.core.runtime import init_runtime

    init_runtime(arch=ARCHS[args.arch])
    if not args.quiet:
        print(f"Using {args.arch.upper()} backend")

    try:
        render_three_lights(
            output_path=args.output,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
