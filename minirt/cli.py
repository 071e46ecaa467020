"""Command line entry point: render a ``.rt`` scene file to a PPM image."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from minirt.parse import SceneError, read_scene_elements
from minirt.render import render, write_ppm
from minirt.scene import build_scene

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


def _report(message: str) -> int:
    print("Error", file=sys.stderr)
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Render the scene named on the command line; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="minirt", description="Ray trace a .rt scene into a PPM image."
    )
    parser.add_argument("scene", help="scene description file ending in .rt")
    parser.add_argument(
        "-o", "--output", help="image file to write (default: scene name with .ppm)"
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)

    try:
        elements = read_scene_elements(args.scene)
        scene = build_scene(elements, args.width, args.height)
        pixels = render(scene)
    except SceneError as exc:
        return _report(str(exc))
    except OSError as exc:
        return _report(str(exc))
    except ValueError as exc:
        return _report(str(exc))

    output = Path(args.output) if args.output else Path(args.scene).with_suffix(".ppm")
    try:
        with open(output, "wb") as stream:
            write_ppm(pixels, stream)
    except OSError as exc:
        return _report(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())