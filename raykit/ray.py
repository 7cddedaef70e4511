"""Rays with a precomputed inverse direction."""

from __future__ import annotations

import math
import sys

from raykit.vector import Vector3f


def _inverse(component: float) -> float:
    if component == 0:
        return math.copysign(math.inf, component)
    return 1.0 / component


class Ray:
    """A ray origin + t * direction."""

    __slots__ = ("origin", "direction", "direction_inv", "t", "t_min", "t_max")

    def __init__(self, origin: Vector3f, direction: Vector3f, t: float = 0.0) -> None:
        self.origin = origin
        self.direction = direction
        self.t = float(t)
        self.direction_inv = Vector3f(
            _inverse(direction.x), _inverse(direction.y), _inverse(direction.z)
        )
        self.t_min = 0.0
        self.t_max = sys.float_info.max

    def at(self, t: float) -> Vector3f:
        """Point reached at parameter t."""
        return self.origin + self.direction * t

    __call__ = at

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, t={self.t!r})"

    def __str__(self) -> str:
        return f"[origin:={self.origin}, direction={self.direction}, time={self.t:g}]"