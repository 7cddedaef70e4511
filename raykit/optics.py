"""Reflection, refraction and Fresnel reflectance."""

from __future__ import annotations

import math

from raykit.vector import Vector3f, dot_product


def clamp(lo: float, hi: float, value: float) -> float:
    """Restrict value to the interval [lo, hi]."""
    return max(lo, min(hi, value))


def reflect(incident: Vector3f, normal: Vector3f) -> Vector3f:
    """Mirror the incident direction about the normal."""
    return incident - 2 * dot_product(incident, normal) * normal


def refract(incident: Vector3f, normal: Vector3f, ior: float) -> Vector3f:
    """Refracted direction by Snell's law, or a zero vector on total internal reflection.

    A ray arriving against the normal enters the medium; otherwise it leaves it,
    and the indices are swapped and the normal flipped.
    """
    cosi = clamp(-1.0, 1.0, dot_product(incident, normal))
    etai, etat = 1.0, float(ior)
    n = normal
    if cosi < 0:
        cosi = -cosi
    else:
        etai, etat = etat, etai
        n = -normal
    eta = etai / etat
    k = 1 - eta * eta * (1 - cosi * cosi)
    if k < 0:
        return Vector3f(0.0)
    return eta * incident + (eta * cosi - math.sqrt(k)) * n


def fresnel(incident: Vector3f, normal: Vector3f, ior: float) -> float:
    """Fraction of light reflected at the surface; the rest is transmitted."""
    cosi = clamp(-1.0, 1.0, dot_product(incident, normal))
    etai, etat = 1.0, float(ior)
    if cosi > 0:
        etai, etat = etat, etai
    sint = etai / etat * math.sqrt(max(0.0, 1 - cosi * cosi))
    if sint >= 1:
        return 1.0
    cost = math.sqrt(max(0.0, 1 - sint * sint))
    cosi = abs(cosi)
    rs = ((etat * cosi) - (etai * cost)) / ((etat * cosi) + (etai * cost))
    rp = ((etai * cosi) - (etat * cost)) / ((etai * cosi) + (etat * cost))
    return (rs * rs + rp * rp) / 2