"""Reading scene description files into validated, still-textual elements."""

from __future__ import annotations

import math
import os
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from minirt.textnum import parse_float, parse_int, split_fields
from minirt.vector import Vec3

_SEPARATORS = " \t\v\f\r"
_EXTENSION = ".rt"


class SceneError(Exception):
    """A scene description that does not follow the format."""


class ElementType(Enum):
    """The kinds of element a scene line can describe."""

    AMBIENT = "A"
    CAMERA = "C"
    POINT_LIGHT = "L"
    SPHERE = "sp"
    PLANE = "pl"
    CYLINDER = "cy"


class Field(Enum):
    """The pieces of information an element line may carry, in line order."""

    POINT = "point"
    BRI_RATIO = "bri_ratio"
    NOR_VEC = "nor_vec"
    DIAMETER = "diameter"
    HEIGHT = "height"
    FOV = "fov"
    RGB = "rgb"


_E = ElementType
_KINDS_USING = {
    Field.POINT: {_E.CAMERA, _E.POINT_LIGHT, _E.SPHERE, _E.PLANE, _E.CYLINDER},
    Field.BRI_RATIO: {_E.AMBIENT, _E.POINT_LIGHT},
    Field.NOR_VEC: {_E.CAMERA, _E.PLANE, _E.CYLINDER},
    Field.DIAMETER: {_E.SPHERE, _E.CYLINDER},
    Field.HEIGHT: {_E.CYLINDER},
    Field.FOV: {_E.CAMERA},
    Field.RGB: {_E.AMBIENT, _E.POINT_LIGHT, _E.SPHERE, _E.PLANE, _E.CYLINDER},
}


@dataclass
class ParsedElement:
    """One scene line split into its named, unconverted fields."""

    ident: str
    kind: ElementType
    point: str | None = None
    bri_ratio: str | None = None
    nor_vec: str | None = None
    diameter: str | None = None
    height: str | None = None
    fov: str | None = None
    rgb: str | None = None


def element_type(ident: str) -> ElementType:
    """Map an element identifier such as ``sp`` to its kind."""
    try:
        return ElementType(ident)
    except ValueError:
        raise SceneError("Invalid element name.") from None


def expected_fields(kind: ElementType) -> tuple[Field, ...]:
    """The fields an element of ``kind`` carries, in the order they appear."""
    return tuple(field for field in Field if kind in _KINDS_USING[field])


def parse_double(text: str | None, minimum: float, maximum: float) -> float:
    """Parse a number and check it against the range ``[minimum, maximum]``.

    A range of ``(0, 0)`` means the number is unbounded.
    """
    try:
        value = parse_float(text)
    except ValueError:
        raise SceneError("Elements must came in standard.") from None
    if minimum == 0 and maximum == 0:
        return value
    if minimum == 0 and maximum == math.inf and value < 0:
        raise SceneError("The properties of the shape must be positive.")
    if minimum == 0 and maximum == 180 and value >= 180:
        raise SceneError("FOV range should be under 180.")
    if minimum == 0 and maximum == 180 and value < 0:
        raise SceneError("FOV range should be over 0.")
    if value < minimum or value > maximum:
        raise SceneError("Elements must came in standard range.")
    return value


def _parse_bounded_int(text: str | None, minimum: int, maximum: int) -> int:
    try:
        value = parse_int(text)
    except ValueError:
        raise SceneError("Number must came in correct type.") from None
    if value < minimum or value > maximum:
        raise SceneError("Number must came in standard range.")
    return value


def _components(text: str | None) -> tuple[list[str | None], bool]:
    """Three comma-separated parts (missing ones as None) and whether more follow."""
    parts: list[str | None] = [] if text is None else list(text.split(","))
    head = parts[:3] + [None] * (3 - len(parts[:3]))
    return head, len(parts) > 3


def parse_int_vector(text: str | None, minimum: int, maximum: int) -> Vec3:
    """Parse ``r,g,b`` integers; with range 0..255 the result is scaled to 0..1."""
    parts, extra = _components(text)
    x, y, z = (_parse_bounded_int(part, minimum, maximum) for part in parts)
    if extra:
        raise SceneError("[r,g,b] elements must came in standard.")
    vec = Vec3(x, y, z)
    if minimum == 0 and maximum == 255:
        vec = vec / 255
    return vec


def parse_double_vector(text: str | None, minimum: float, maximum: float) -> Vec3:
    """Parse ``x,y,z`` numbers.

    With range -1..1 the vector is normalised; with 0..255 it is scaled to 0..1.
    """
    parts, extra = _components(text)
    x, y, z = (parse_double(part, minimum, maximum) for part in parts)
    if extra:
        raise SceneError("[x,y,z] elements must came in standard.")
    vec = Vec3(x, y, z)
    if minimum == -1 and maximum == 1:
        if vec.length() == 0.0:
            raise SceneError("Normalized vector must came in standard.")
        vec = vec.unit()
    elif minimum == 0 and maximum == 255:
        vec = vec / 255
    return vec


def parse_line(line: str) -> ParsedElement | None:
    """Split one scene line into an element; blank lines give None."""
    words = split_fields(line, _SEPARATORS)
    if not words:
        return None
    ident, *values = words
    kind = element_type(ident)
    fields = expected_fields(kind)
    if len(values) != len(fields):
        raise SceneError("Elements came in more than standard.")
    return ParsedElement(
        ident=ident,
        kind=kind,
        **{field.value: value for field, value in zip(fields, values)},
    )


def parse_lines(lines: Iterable[str]) -> list[ParsedElement]:
    """Parse every line and check there is exactly one ambient, light and camera."""
    elements = [element for element in map(parse_line, lines) if element is not None]
    counts = Counter(element.kind for element in elements)
    if any(counts[kind] != 1 for kind in (_E.AMBIENT, _E.POINT_LIGHT, _E.CAMERA)):
        raise SceneError("Each Ambient, Light and Camera must be one.")
    return elements


def check_scene_path(path: str | os.PathLike[str]) -> str:
    """Return the path as a string once it is known to end in ``.rt``."""
    name = os.fspath(path)
    if len(name) < len(_EXTENSION) or not name.endswith(_EXTENSION):
        raise SceneError("The file extension must include [.rt].")
    return name


def read_scene_elements(path: str | os.PathLike[str]) -> list[ParsedElement]:
    """Read and parse a scene file.

    A path that cannot be opened raises OSError; one that cannot be read
    as a file raises SceneError.
    """
    name = check_scene_path(path)
    try:
        with open(name, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except IsADirectoryError:
        raise SceneError("File format does not match.") from None
    return parse_lines(text.split("\n"))