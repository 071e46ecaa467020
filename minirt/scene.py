"""Scene model: the camera, lights and shapes built from parsed elements."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Union

from minirt.parse import (
    ElementType,
    ParsedElement,
    parse_double,
    parse_double_vector,
    parse_int_vector,
)
from minirt.vector import Color3, Point3, Vec3, coordinate_system


@dataclass(frozen=True)
class Ambient:
    """Light that reaches every surface regardless of position."""

    light_ratio: float = 0.0
    light_color: Color3 = Vec3()


@dataclass(frozen=True)
class Camera:
    """A pinhole camera and the viewport it projects onto."""

    origin: Point3
    u_dir: Vec3
    v_dir: Vec3
    w_dir: Vec3
    viewport_width: float
    viewport_height: float
    horizontal: Vec3
    vertical: Vec3
    left_bottom: Point3


@dataclass(frozen=True)
class Light:
    """A point light source."""

    origin: Point3
    bright_ratio: float
    color: Color3


@dataclass(frozen=True)
class Sphere:
    center: Point3
    radius: float
    color: Color3

    @property
    def radius2(self) -> float:
        return self.radius * self.radius


@dataclass(frozen=True)
class Plane:
    point: Point3
    normal: Vec3
    color: Color3


@dataclass(frozen=True)
class Cylinder:
    """A finite open cylinder whose base centre is ``center``, running along ``normal``."""

    center: Point3
    normal: Vec3
    radius: float
    height: float
    color: Color3

    @property
    def radius2(self) -> float:
        return self.radius * self.radius


Shape = Union[Sphere, Plane, Cylinder]


@dataclass
class Scene:
    """Everything needed to render one image."""

    width: int
    height: int
    ambient: Ambient = field(default_factory=Ambient)
    camera: Camera | None = None
    lights: list[Light] = field(default_factory=list)
    objects: list[Shape] = field(default_factory=list)

    @property
    def aspect_ratio(self) -> float:
        return self.height / self.width


def make_camera(
    origin: Point3, direction: Vec3, fov: float, aspect_ratio: float
) -> Camera:
    """Build a camera looking along ``direction`` with horizontal field of view ``fov`` degrees."""
    field_width = math.tan(math.radians(fov) / 2) * 2.0
    w_dir = direction * -1
    u_dir, v_dir = coordinate_system(w_dir)
    viewport_height = field_width * aspect_ratio
    horizontal = u_dir * field_width
    vertical = v_dir * viewport_height
    left_bottom = origin - ((horizontal + vertical) / 2 + w_dir)
    return Camera(
        origin=origin,
        u_dir=u_dir,
        v_dir=v_dir,
        w_dir=w_dir,
        viewport_width=field_width,
        viewport_height=viewport_height,
        horizontal=horizontal,
        vertical=vertical,
        left_bottom=left_bottom,
    )


def _rgb(element: ParsedElement) -> Color3:
    return parse_int_vector(element.rgb, 0, 255)


def _point(element: ParsedElement) -> Point3:
    return parse_double_vector(element.point, 0, 0)


def _normal(element: ParsedElement) -> Vec3:
    return parse_double_vector(element.nor_vec, -1, 1)


def _radius(element: ParsedElement) -> float:
    return parse_double(element.diameter, 0, math.inf) / 2


def build_scene(elements: Iterable[ParsedElement], width: int, height: int) -> Scene:
    """Convert parsed elements into a scene for a canvas of ``width`` by ``height``."""
    scene = Scene(width=width, height=height)
    for element in elements:
        kind = element.kind
        if kind is ElementType.AMBIENT:
            scene.ambient = Ambient(
                light_ratio=parse_double(element.bri_ratio, 0.0, 1.0),
                light_color=_rgb(element),
            )
        elif kind is ElementType.CAMERA:
            origin = _point(element)
            direction = _normal(element)
            fov = parse_double(element.fov, 0, 180)
            scene.camera = make_camera(origin, direction, fov, scene.aspect_ratio)
        elif kind is ElementType.POINT_LIGHT:
            origin = _point(element)
            ratio = parse_double(element.bri_ratio, 0.0, 1.0)
            scene.lights.append(Light(origin, ratio, _rgb(element)))
        elif kind is ElementType.SPHERE:
            center = _point(element)
            radius = _radius(element)
            scene.objects.append(Sphere(center, radius, _rgb(element)))
        elif kind is ElementType.PLANE:
            point = _point(element)
            normal = _normal(element)
            scene.objects.append(Plane(point, normal, _rgb(element)))
        elif kind is ElementType.CYLINDER:
            center = _point(element)
            normal = _normal(element)
            radius = _radius(element)
            cyl_height = parse_double(element.height, 0, math.inf)
            scene.objects.append(
                Cylinder(center, normal, radius, cyl_height, _rgb(element))
            )
    return scene