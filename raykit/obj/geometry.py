"""Vector, vertex, material and mesh records used by the OBJ loader."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Union

Number = Union[int, float]


@dataclass
class Vector2:
    """A 2D vector, used for texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Number) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__


@dataclass
class Vector3:
    """A 3D vector, used for positions, normals and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: Number) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Number) -> Vector3:
        if scalar == 0:
            return Vector3(*(_divide_by_zero(c) for c in self))
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)


def _divide_by_zero(component: float) -> float:
    if component == 0 or math.isnan(component):
        return math.nan
    return math.copysign(math.inf, component)


@dataclass
class Vertex:
    """A mesh vertex: position, normal and texture coordinate."""

    position: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    texture_coordinate: Vector2 = field(default_factory=Vector2)


@dataclass
class Material:
    """Surface description read from an MTL file."""

    name: str = ""
    ka: Vector3 = field(default_factory=Vector3)
    kd: Vector3 = field(default_factory=Vector3)
    ks: Vector3 = field(default_factory=Vector3)
    ns: float = 0.0
    ni: float = 0.0
    d: float = 0.0
    illum: int = 0
    map_ka: str = ""
    map_kd: str = ""
    map_ks: str = ""
    map_ns: str = ""
    map_d: str = ""
    map_bump: str = ""


@dataclass
class Mesh:
    """A named list of vertices, triangle indices and a material."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    name: str = ""
    material: Material = field(default_factory=Material)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Vector product a x b."""
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def magnitude(v: Vector3) -> float:
    """Euclidean length."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def dot(a: Vector3, b: Vector3) -> float:
    """Scalar product."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def angle_between(a: Vector3, b: Vector3) -> float:
    """Angle in radians between a and b; NaN when it is undefined."""
    denom = magnitude(a) * magnitude(b)
    if denom == 0:
        return math.nan
    cosine = dot(a, b) / denom
    if not -1.0 <= cosine <= 1.0:
        return math.nan
    return math.acos(cosine)


def project(a: Vector3, b: Vector3) -> Vector3:
    """Projection of a onto b; NaN components when b has no length."""
    bn = b / magnitude(b)
    return bn * dot(a, bn)