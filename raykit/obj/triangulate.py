"""Turning OBJ face lines into vertices and triangle indices."""

from __future__ import annotations

from typing import Sequence

from raykit.obj.algorithm import get_element, in_triangle, split, tail
from raykit.obj.geometry import Vector2, Vector3, Vertex, cross


def _copy3(v: Vector3) -> Vector3:
    return Vector3(v.x, v.y, v.z)


def _copy2(v: Vector2) -> Vector2:
    return Vector2(v.x, v.y)


def vertices_from_face(
    positions: Sequence[Vector3],
    tcoords: Sequence[Vector2],
    normals: Sequence[Vector3],
    line: str,
) -> list[Vertex]:
    """Build the vertices named by an ``f`` line.

    Each element is ``p``, ``p/t``, ``p//n`` or ``p/t/n``. When any element
    lacks a normal, every vertex gets the face normal of the first three.
    """
    vertices: list[Vertex] = []
    missing_normal = False

    for element in split(tail(line), " "):
        parts = split(element, "/")
        if len(parts) == 1:
            vertices.append(Vertex(
                position=_copy3(get_element(positions, parts[0])),
                texture_coordinate=Vector2(0.0, 0.0),
            ))
            missing_normal = True
        elif len(parts) == 2:
            vertices.append(Vertex(
                position=_copy3(get_element(positions, parts[0])),
                texture_coordinate=_copy2(get_element(tcoords, parts[1])),
            ))
            missing_normal = True
        elif len(parts) == 3:
            texture = (
                _copy2(get_element(tcoords, parts[1])) if parts[1] else Vector2(0.0, 0.0)
            )
            vertices.append(Vertex(
                position=_copy3(get_element(positions, parts[0])),
                normal=_copy3(get_element(normals, parts[2])),
                texture_coordinate=texture,
            ))

    if missing_normal and len(vertices) >= 3:
        a = vertices[0].position - vertices[1].position
        b = vertices[2].position - vertices[1].position
        face_normal = cross(a, b)
        for vertex in vertices:
            vertex.normal = _copy3(face_normal)

    return vertices


def _matching(vertices: Sequence[Vertex], *wanted: Vector3) -> list[int]:
    """Indices of vertices whose position equals any wanted one, per vertex in order."""
    found: list[int] = []
    for j, vertex in enumerate(vertices):
        found.extend(j for target in wanted if vertex.position == target)
    return found


def triangulate(vertices: Sequence[Vertex]) -> list[int]:
    """Ear-clip a polygon into triangle indices into ``vertices``."""
    if len(vertices) < 3:
        return []
    if len(vertices) == 3:
        return [0, 1, 2]

    remaining = list(vertices)
    indices: list[int] = []
    i = 0
    while i < len(remaining):
        prev = remaining[i - 1]
        cur = remaining[i]
        nxt = remaining[(i + 1) % len(remaining)]

        if len(remaining) == 3:
            indices += _matching(vertices[:3], cur.position, prev.position, nxt.position)
            break

        if len(remaining) == 4:
            indices += _matching(vertices, cur.position, prev.position, nxt.position)
            last = next(
                (
                    v.position
                    for v in remaining
                    if v.position not in (cur.position, prev.position, nxt.position)
                ),
                Vector3(),
            )
            indices += _matching(vertices, prev.position, nxt.position, last)
            break

        blocked = any(
            in_triangle(v.position, prev.position, cur.position, nxt.position)
            and v.position not in (prev.position, cur.position, nxt.position)
            for v in vertices
        )
        if blocked:
            i += 1
            continue

        indices += _matching(vertices, cur.position, prev.position, nxt.position)
        del remaining[next(j for j, v in enumerate(remaining) if v.position == cur.position)]
        i = 0

    return indices