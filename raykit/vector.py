"""Small 2D and 3D vector types and the free functions that operate on them."""

from __future__ import annotations

import math
from typing import Iterator, Union

Number = Union[int, float]


def _fmt(value: float) -> str:
    return f"{value:g}"


class Vector3f:
    """A 3D vector of floats with component-wise arithmetic."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: Number = 0.0, y: Number | None = None, z: Number | None = None) -> None:
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError("Vector3f takes one value or three")
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3f:
        """Unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        n = self.norm()
        return Vector3f(self.x / n, self.y / n, self.z / n)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __setitem__(self, index: int, value: Number) -> None:
        name = ("x", "y", "z")[index]
        setattr(self, name, float(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Vector3f) -> Vector3f:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3f) -> Vector3f:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3f | Number) -> Vector3f:
        if isinstance(other, Vector3f):
            return Vector3f(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3f(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector3f:
        if isinstance(other, (int, float)):
            return Vector3f(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Number) -> Vector3f:
        if isinstance(other, (int, float)):
            return Vector3f(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> Vector3f:
        return Vector3f(-self.x, -self.y, -self.z)

    def __repr__(self) -> str:
        return f"Vector3f({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self) -> str:
        return f"{_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)}"


class Vector2f:
    """A 2D vector of floats."""

    __slots__ = ("x", "y")

    def __init__(self, x: Number = 0.0, y: Number | None = None) -> None:
        if y is None:
            y = x
        self.x = float(x)
        self.y = float(y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __mul__(self, other: Number) -> Vector2f:
        if isinstance(other, (int, float)):
            return Vector2f(self.x * other, self.y * other)
        return NotImplemented

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Vector2f({self.x!r}, {self.y!r})"


def elementwise_min(p1: Vector3f, p2: Vector3f) -> Vector3f:
    """Component-wise minimum of two vectors."""
    return Vector3f(min(p1.x, p2.x), min(p1.y, p2.y), min(p1.z, p2.z))


def elementwise_max(p1: Vector3f, p2: Vector3f) -> Vector3f:
    """Component-wise maximum of two vectors."""
    return Vector3f(max(p1.x, p2.x), max(p1.y, p2.y), max(p1.z, p2.z))


def lerp(a: Vector3f, b: Vector3f, t: float) -> Vector3f:
    """Linear interpolation between a (t=0) and b (t=1)."""
    return a * (1 - t) + b * t


def normalize(v: Vector3f) -> Vector3f:
    """Unit vector along v; a zero vector is returned unchanged."""
    mag2 = v.x * v.x + v.y * v.y + v.z * v.z
    if mag2 > 0:
        inv = 1 / math.sqrt(mag2)
        return Vector3f(v.x * inv, v.y * inv, v.z * inv)
    return Vector3f(v.x, v.y, v.z)


def dot_product(a: Vector3f, b: Vector3f) -> float:
    """Scalar product."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross_product(a: Vector3f, b: Vector3f) -> Vector3f:
    """Vector product a x b."""
    return Vector3f(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )