"""String and geometry helpers used while reading OBJ and MTL files."""

from __future__ import annotations

import re
from typing import Sequence, TypeVar

from raykit.obj.geometry import Vector3, cross, dot, magnitude, project

T = TypeVar("T")

_BLANKS = " \t"
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def same_side(p1: Vector3, p2: Vector3, a: Vector3, b: Vector3) -> bool:
    """True when p1 and p2 lie on the same side of the line through a and b."""
    edge = b - a
    cp1 = cross(edge, p1 - a)
    cp2 = cross(edge, p2 - a)
    return dot(cp1, cp2) >= 0


def triangle_normal(t1: Vector3, t2: Vector3, t3: Vector3) -> Vector3:
    """Unnormalised face normal of the triangle (t1, t2, t3)."""
    return cross(t2 - t1, t3 - t1)


def in_triangle(point: Vector3, tri1: Vector3, tri2: Vector3, tri3: Vector3) -> bool:
    """True when point lies inside the triangle's prism and on its plane through the origin."""
    within_prism = (
        same_side(point, tri1, tri2, tri3)
        and same_side(point, tri2, tri1, tri3)
        and same_side(point, tri3, tri1, tri2)
    )
    if not within_prism:
        return False
    normal = triangle_normal(tri1, tri2, tri3)
    return magnitude(project(point, normal)) == 0


def split(text: str, token: str) -> list[str]:
    """Split text at token.

    A token met with nothing collected since the last one yields an empty
    field; a trailing token yields none.
    """
    if not token:
        raise ValueError("split token must not be empty")
    parts: list[str] = []
    current = ""
    width = len(token)
    pos = 0
    while pos < len(text):
        if text.startswith(token, pos):
            if current:
                parts.append(current)
                current = ""
                pos += width - 1
            else:
                parts.append("")
        elif pos + width >= len(text):
            parts.append(current + text[pos:pos + width])
            break
        else:
            current += text[pos]
        pos += 1
    return parts


def _first_blank(text: str) -> int:
    """Index of the first space or tab in text, or -1."""
    return next((i for i, ch in enumerate(text) if ch in _BLANKS), -1)


def tail(text: str) -> str:
    """Everything after the first token, without surrounding spaces and tabs."""
    rest = text.lstrip(_BLANKS)
    cut = _first_blank(rest)
    if cut < 0:
        return ""
    return rest[cut:].strip(_BLANKS)


def first_token(text: str) -> str:
    """The first run of characters that are neither spaces nor tabs."""
    rest = text.lstrip(_BLANKS)
    cut = _first_blank(rest)
    return rest if cut < 0 else rest[:cut]


def get_element(elements: Sequence[T], index: str) -> T:
    """Look up an OBJ index: 1-based from the front, negative from the back."""
    match = _INTEGER.match(index)
    if match is None:
        raise ValueError(f"invalid index: {index!r}")
    idx = int(match.group(1))
    idx = len(elements) + idx if idx < 0 else idx - 1
    if not 0 <= idx < len(elements):
        raise IndexError(f"index {index!r} out of range for {len(elements)} elements")
    return elements[idx]