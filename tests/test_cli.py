import pytest

from minirt.cli import main

GOOD_SCENE = "\n".join(
    [
        "A 0.2 255,255,255",
        "C 0,0,0 0,0,-1 70",
        "L 0,5,0 0.7 255,255,255",
        "sp 0,0,-5 2 255,0,0",
        "pl 0,-1,0 0,1,0 0,255,0",
    ]
)


def test_renders_scene_to_ppm(tmp_path):
    scene = tmp_path / "ball.rt"
    scene.write_text(GOOD_SCENE)
    out = tmp_path / "ball.ppm"
    status = main([str(scene), "-o", str(out), "--width", "4", "--height", "3"])
    assert status == 0
    data = out.read_bytes()
    header = b"P6\n4 3\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 4 * 3 * 3


def test_default_output_next_to_scene(tmp_path):
    scene = tmp_path / "room.rt"
    scene.write_text(GOOD_SCENE)
    assert main([str(scene), "--width", "2", "--height", "2"]) == 0
    assert (tmp_path / "room.ppm").read_bytes().startswith(b"P6\n2 2\n255\n")


def test_bad_extension(tmp_path, capsys):
    scene = tmp_path / "scene.txt"
    scene.write_text(GOOD_SCENE)
    assert main([str(scene)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error\n")
    assert "The file extension must include [.rt]." in err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.rt")]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_missing_ambient(tmp_path, capsys):
    scene = tmp_path / "dark.rt"
    scene.write_text("C 0,0,0 0,0,-1 70\nL 0,5,0 0.7 255,255,255\n")
    assert main([str(scene)]) == 1
    assert "Each Ambient, Light and Camera must be one." in capsys.readouterr().err


def test_requires_scene_argument():
    with pytest.raises(SystemExit):
        main([])