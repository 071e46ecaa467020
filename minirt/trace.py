"""Ray casting: intersections with shapes, Phong shading and the sky background."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable

from minirt.scene import Camera, Cylinder, Light, Plane, Scene, Shape, Sphere
from minirt.vector import Color3, Point3, Vec3

EPSILON = 1e-6
SPECULAR_STRENGTH = 0.5
SPECULAR_EXPONENT = 64

_WHITE = Vec3(1, 1, 1)
_SKY = Vec3(0.5, 0.7, 1.0)
_BLACK = Vec3(0, 0, 0)


@dataclass(frozen=True)
class Ray:
    """A half-line ``origin + t * direction``."""

    origin: Point3
    direction: Vec3

    def at(self, t: float) -> Point3:
        """The point reached after travelling ``t`` along the direction."""
        return self.origin + self.direction * t


@dataclass(frozen=True)
class HitRecord:
    """Where a ray met a surface; ``normal`` always faces against the ray."""

    t: float
    p: Point3
    normal: Vec3
    front_face: bool
    color: Color3


def primary_ray(camera: Camera, alpha: float, beta: float) -> Ray:
    """The ray through the viewport point at fractions ``alpha`` across and ``beta`` up."""
    target = camera.left_bottom + camera.horizontal * alpha + camera.vertical * beta
    return Ray(camera.origin, (target - camera.origin).unit())


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def solve_root(a: float, half_b: float, c: float, nearer: bool) -> float:
    """One root of ``a t^2 + 2 half_b t + c = 0``; nan when there is none.

    ``nearer`` selects the root with the minus sign before the square root.
    """
    discriminant = half_b * half_b - a * c
    if discriminant < 0:
        return math.nan
    sqrt_d = math.sqrt(discriminant)
    if nearer:
        return _divide(-half_b - sqrt_d, a)
    return _divide(-half_b + sqrt_d, a)


def _facing(ray: Ray, t: float, p: Point3, normal: Vec3, color: Color3) -> HitRecord:
    front_face = ray.direction.dot(normal) < 0
    if not front_face:
        normal = normal * -1
    return HitRecord(t=t, p=p, normal=normal, front_face=front_face, color=color)


def _outside(root: float, t_min: float, t_max: float) -> bool:
    return math.isnan(root) or root < t_min or t_max < root


def _hit_sphere(sphere: Sphere, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
    oc = ray.origin - sphere.center
    a = ray.direction.length_squared()
    half_b = ray.direction.dot(oc)
    c = oc.length_squared() - sphere.radius2
    for nearer in (True, False):
        root = solve_root(a, half_b, c, nearer)
        if _outside(root, t_min, t_max):
            continue
        p = ray.at(root)
        return _facing(ray, root, p, (p - sphere.center).unit(), sphere.color)
    return None


def _hit_plane(plane: Plane, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
    denominator = ray.direction.dot(plane.normal)
    if denominator == 0:
        return None
    numerator = -(ray.origin - plane.point).dot(plane.normal)
    root = numerator / denominator
    if root < t_min or t_max < root:
        return None
    return _facing(ray, root, ray.at(root), plane.normal, plane.color)


def _hit_cylinder(
    cylinder: Cylinder, ray: Ray, t_min: float, t_max: float
) -> HitRecord | None:
    axis = cylinder.normal
    oc = ray.origin - cylinder.center
    d_axis = ray.direction.dot(axis)
    oc_axis = oc.dot(axis)
    a = ray.direction.dot(ray.direction) - d_axis * d_axis
    half_b = ray.direction.dot(oc) - oc_axis * d_axis
    c = oc.dot(oc) - oc_axis * oc_axis - cylinder.radius2
    for nearer in (True, False):
        root = solve_root(a, half_b, c, nearer)
        if _outside(root, t_min, t_max):
            continue
        p = ray.at(root)
        p_height = (p - cylinder.center).dot(axis)
        if p_height < 0 or p_height > cylinder.height:
            continue
        normal = (p - (cylinder.center + axis * p_height)).unit()
        return _facing(ray, root, p, normal, cylinder.color)
    return None


_HITTERS: dict[type, Callable[..., HitRecord | None]] = {
    Sphere: _hit_sphere,
    Plane: _hit_plane,
    Cylinder: _hit_cylinder,
}


def intersect(shape: Shape, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
    """The hit of ``ray`` on ``shape`` with ``t`` in ``[t_min, t_max]``, if any."""
    try:
        hitter = _HITTERS[type(shape)]
    except KeyError:
        raise TypeError(f"cannot intersect {type(shape).__name__}") from None
    return hitter(shape, ray, t_min, t_max)


def closest_hit(
    objects: Iterable[Shape], ray: Ray, t_min: float, t_max: float
) -> HitRecord | None:
    """The nearest hit among ``objects`` within ``[t_min, t_max]``, if any."""
    best: HitRecord | None = None
    for shape in objects:
        record = intersect(shape, ray, t_min, t_max)
        if record is not None:
            best = record
            t_max = record.t
    return best


def is_in_shadow(scene: Scene, point: Point3, light_dir: Vec3, light_len: float) -> bool:
    """Whether any object lies between ``point`` and a light ``light_len`` away."""
    shadow_ray = Ray(point + light_dir * EPSILON, light_dir)
    return closest_hit(scene.objects, shadow_ray, 0, light_len) is not None


def phong_diffuse(normal: Vec3, light_color: Color3, light_dir: Vec3) -> Color3:
    """Lambertian term with a diffuse coefficient of one."""
    kd = max(0.0, normal.dot(light_dir))
    return light_color * kd


def phong_specular(
    normal: Vec3, ray_direction: Vec3, light_color: Color3, light_dir: Vec3
) -> Color3:
    """Phong highlight with strength 0.5 and shininess 64."""
    view_dir = (ray_direction * -1).unit()
    reflect_dir = normal * (normal.dot(light_dir) * 2) - light_dir
    spec = max(0.0, reflect_dir.dot(view_dir)) ** SPECULAR_EXPONENT
    return light_color * SPECULAR_STRENGTH * spec


def point_light_color(scene: Scene, ray: Ray, record: HitRecord, light: Light) -> Color3:
    """Diffuse plus specular light from one point light, or black when shadowed."""
    to_light = light.origin - record.p
    light_len = to_light.length()
    light_dir = to_light.unit()
    if is_in_shadow(scene, record.p, light_dir, light_len):
        return _BLACK
    phong = phong_diffuse(record.normal, light.color, light_dir) + phong_specular(
        record.normal, ray.direction, light.color, light_dir
    )
    return phong * light.bright_ratio


def illuminate(scene: Scene, ray: Ray, record: HitRecord) -> Color3:
    """Colour at a hit: all lights plus ambient, tinted by the surface and capped at one."""
    total = _BLACK
    for light in scene.lights:
        total = total + point_light_color(scene, ray, record, light)
    total = total + scene.ambient.light_color * scene.ambient.light_ratio
    return _WHITE.minimum(total.mult(record.color))


def trace_ray(scene: Scene, ray: Ray) -> Color3:
    """The colour seen along ``ray``: a shaded surface or the sky gradient."""
    record = closest_hit(scene.objects, ray, EPSILON, math.inf)
    if record is not None:
        return illuminate(scene, ray, record)
    t = 0.5 * (ray.direction.y + 1.0)
    return _WHITE * (1.0 - t) + _SKY * t