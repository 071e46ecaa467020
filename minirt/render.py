"""Turning a scene into pixels and writing them out as a PPM image."""

from __future__ import annotations

from typing import BinaryIO, Sequence

from minirt.scene import Scene
from minirt.trace import primary_ray, trace_ray
from minirt.vector import Color3


def color_channel(value: float) -> int:
    """Scale a colour component in ``[0, 1]`` to an 8-bit channel, capped at 255."""
    return min(int(256 * value), 255)


def pack_color(color: Color3) -> int:
    """Pack an RGB colour into a ``0xRRGGBB`` integer."""
    return (
        color_channel(color.x) << 16
        | color_channel(color.y) << 8
        | color_channel(color.z)
    )


def render(scene: Scene) -> list[list[int]]:
    """Trace one ray per pixel and return rows of packed colours, top row first."""
    if scene.camera is None:
        raise ValueError("the scene has no camera")
    if scene.width < 2 or scene.height < 2:
        raise ValueError("the canvas must be at least 2 by 2 pixels")
    width, height = scene.width, scene.height
    pixels = [[0] * width for _ in range(height)]
    for row in range(height - 1, -1, -1):
        beta = row / (height - 1)
        line = pixels[height - 1 - row]
        for col in range(width):
            alpha = col / (width - 1)
            ray = primary_ray(scene.camera, alpha, beta)
            line[col] = pack_color(trace_ray(scene, ray))
    return pixels


def write_ppm(pixels: Sequence[Sequence[int]], stream: BinaryIO) -> None:
    """Write rows of ``0xRRGGBB`` pixels to a binary stream as a P6 image."""
    height = len(pixels)
    width = len(pixels[0]) if height else 0
    if width == 0:
        raise ValueError("an image needs at least one pixel")
    if any(len(row) != width for row in pixels):
        raise ValueError("all rows must have the same width")
    body = bytearray()
    for row in pixels:
        for pixel in row:
            body += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    stream.write(f"P6\n{width} {height}\n255\n".encode("ascii"))
    stream.write(bytes(body))