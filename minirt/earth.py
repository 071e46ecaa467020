"""Generate a scene that looks at the earth from above a given place."""

from __future__ import annotations

import math
import sys

from minirt.vector import Vec3

_RADIUS = 10
_USAGE = "Error: Usage: miniearth <latitude> <S/N> <longitude> <W/E>"
_RANGE = "Error: latitude should be [0, 90) and longitude should be [0, 180)"


def _fmt(vec: Vec3) -> str:
    return ",".join(f"{component:f}" for component in vec)


def earth_scene(
    latitude: float, north_south: str, longitude: float, west_east: str
) -> str:
    """Scene text with the camera above the given latitude and longitude.

    Latitude must lie in ``[0, 90)`` and longitude in ``[0, 180)``; ``S`` and
    ``W`` flip the hemisphere.
    """
    if not (0 <= latitude < 90) or not (0 <= longitude < 180):
        raise ValueError(_RANGE)
    theta = -latitude if north_south.startswith("S") else latitude
    phi = -longitude if west_east.startswith("W") else longitude
    theta = math.radians(theta + 90)
    phi = math.radians(phi + 180)

    surface = Vec3(
        -math.cos(phi) * math.sin(theta) * _RADIUS,
        -math.cos(theta) * _RADIUS,
        math.sin(phi) * math.sin(theta) * _RADIUS,
    )
    normal = surface.unit()
    camera_origin = normal * 15
    camera_u = Vec3(0, 1, 0).cross(normal)
    if camera_u.length_squared() == 0:
        camera_u = Vec3(0, 0, 1).cross(normal)
    camera_u = camera_u.unit()
    camera_v = normal.cross(camera_u)
    light = camera_origin + (camera_u * -5 + camera_v * 5)

    return "".join(
        [
            "A 0.2 255,255,255\n",
            f"C {_fmt(camera_origin)} {_fmt(normal * -1)} 45\n",
            f"L {_fmt(light)} 0.8 255,255,255\n",
            "sp 0,0,0 10 bm ./input_bonus/earthmap.xpm "
            "./input_bonus/earthmap_normal.xpm 1 0.5 2\n",
            "sp 0,0,0 50 bm ./input_bonus/milkyway.xpm 1 0.5 2\n",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Print the earth scene for ``latitude S/N longitude W/E``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 4:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        latitude = float(args[0])
        longitude = float(args[2])
    except ValueError:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        text = earth_scene(latitude, args[1], longitude, args[3])
    except ValueError as exc:
        print(exc)
        return 1
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())