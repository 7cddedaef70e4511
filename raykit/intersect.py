"""Ray and triangle intersection (Möller–Trumbore, front faces only)."""

from __future__ import annotations

from dataclasses import dataclass

from raykit.vector import Vector3f, cross_product, dot_product


@dataclass(frozen=True)
class TriangleHit:
    """Where a ray meets a triangle.

    ``t`` is the ray parameter; ``u`` and ``v`` are the barycentric weights
    of the second and third vertices.
    """

    t: float
    u: float
    v: float


def ray_triangle_intersect(
    v0: Vector3f,
    v1: Vector3f,
    v2: Vector3f,
    origin: Vector3f,
    direction: Vector3f,
) -> TriangleHit | None:
    """Intersect a ray with triangle (v0, v1, v2).

    Returns None when the ray misses, runs parallel to the triangle or
    meets its back face.
    """
    edge1 = v1 - v0
    edge2 = v2 - v0
    pvec = cross_product(direction, edge2)
    det = dot_product(edge1, pvec)
    if det <= 0:
        return None

    tvec = origin - v0
    u = dot_product(tvec, pvec)
    if u < 0 or u > det:
        return None

    qvec = cross_product(tvec, edge1)
    v = dot_product(direction, qvec)
    if v < 0 or u + v > det:
        return None

    inv_det = 1 / det
    t = dot_product(edge2, qvec) * inv_det
    return TriangleHit(t=t, u=u * inv_det, v=v * inv_det)