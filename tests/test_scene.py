import math

import pytest

from minirt.parse import SceneError, parse_lines
from minirt.scene import (
    Cylinder,
    Light,
    Plane,
    Sphere,
    build_scene,
    make_camera,
)
from minirt.vector import Vec3

BASE = [
    "A 0.2 255,255,255",
    "C 0,0,10 0,0,-1 90",
    "L 5,5,5 0.7 255,255,255",
]


def _close(a: Vec3, b: Vec3) -> bool:
    return all(math.isclose(p, q, abs_tol=1e-9) for p, q in zip(a, b))


def _scene(*extra, width=4, height=2):
    return build_scene(parse_lines(BASE + list(extra)), width, height)


@pytest.mark.parametrize(
    "direction",
    [Vec3(0, 0, -1), Vec3(1, 2, 3).unit(), Vec3(0, 1, 0), Vec3(0, -1, 0)],
)
def test_camera_basis_is_orthonormal(direction):
    cam = make_camera(Vec3(1, 2, 3), direction, 70, 0.75)
    for axis in (cam.u_dir, cam.v_dir, cam.w_dir):
        assert math.isclose(axis.length(), 1.0)
    assert math.isclose(cam.u_dir.dot(cam.v_dir), 0.0, abs_tol=1e-9)
    assert math.isclose(cam.u_dir.dot(cam.w_dir), 0.0, abs_tol=1e-9)
    assert math.isclose(cam.v_dir.dot(cam.w_dir), 0.0, abs_tol=1e-9)
    assert _close(cam.w_dir, direction * -1)


def test_camera_viewport_geometry():
    origin = Vec3(1, 2, 3)
    cam = make_camera(origin, Vec3(0, 0, -1), 60, 0.5)
    assert math.isclose(cam.viewport_height, cam.viewport_width * 0.5)
    assert math.isclose(cam.horizontal.length(), cam.viewport_width)
    assert math.isclose(cam.vertical.length(), cam.viewport_height)
    centre = cam.left_bottom + cam.horizontal / 2 + cam.vertical / 2
    assert _close(centre + cam.w_dir, origin)


def test_camera_ninety_degree_field_width():
    cam = make_camera(Vec3(), Vec3(0, 0, -1), 90, 1.0)
    assert math.isclose(cam.viewport_width, 2.0)
    assert _close(cam.u_dir, Vec3(1, 0, 0))
    assert _close(cam.v_dir, Vec3(0, 1, 0))


def test_build_scene_basic_fields():
    scene = _scene()
    assert scene.width == 4 and scene.height == 2
    assert scene.aspect_ratio == 2 / 4
    assert scene.ambient.light_ratio == 0.2
    assert scene.ambient.light_color == Vec3(1, 1, 1)
    assert scene.lights == [Light(Vec3(5, 5, 5), 0.7, Vec3(1, 1, 1))]
    assert scene.objects == []


def test_build_scene_camera_matches_make_camera():
    scene = _scene()
    expected = make_camera(Vec3(0, 0, 10), Vec3(0, 0, -1), 90, scene.aspect_ratio)
    assert scene.camera == expected


def test_build_scene_without_camera_keeps_defaults():
    scene = build_scene([], 10, 10)
    assert scene.camera is None
    assert scene.ambient.light_ratio == 0.0
    assert scene.ambient.light_color == Vec3()


@pytest.mark.parametrize(
    "line",
    [
        "sp 0,0,0 -1 255,0,0",
        "sp 0,0,0 4 256,0,0",
        "pl 0,0,0 0,0,0 255,0,0",
        "cy 0,0,0 0,1,0 2 -3 0,0,0",
        "sp 0,0 4 255,0,0",
        "sp 0,0,0 4 1,2,3,4",
    ],
)
def test_build_scene_rejects_bad_values(line):
    with pytest.raises(SceneError):
        _scene(line)


@pytest.mark.parametrize(
    "lines",
    [
        ["A 1.5 255,255,255", "C 0,0,0 0,0,1 90", "L 0,0,0 0.5 255,255,255"],
        ["A 0.5 255,255,255", "C 0,0,0 0,0,1 180", "L 0,0,0 0.5 255,255,255"],
        ["A 0.5 255,255,255", "C 0,0,0 0,0,1 -5", "L 0,0,0 0.5 255,255,255"],
        ["A 0.5 255,255,255", "C 0,0,0 0,0,1 90", "L 0,0,0 2 255,255,255"],
    ],
)
def test_build_scene_rejects_bad_environment(lines):
    with pytest.raises(SceneError):
        build_scene(parse_lines(lines), 4, 2)