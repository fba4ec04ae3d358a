"""Clipping of triangle meshes against a plane, with capping of the cut."""

from __future__ import annotations

import math

_FLOAT_EPSILON = 1.1920928955078125e-07


def _dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _sub(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _add(a, b):
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _mul(a, s):
    return (a[0] * s, a[1] * s, a[2] * s)


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(a):
    length = math.sqrt(_dot(a, a))
    if length == 0:
        return a
    return _mul(a, 1.0 / length)


def _ray_plane_intersection(la, lb, normal, d):
    denom = _dot(normal, _sub(la, lb))
    if abs(denom) <= _FLOAT_EPSILON:
        return None
    t = (_dot(normal, la) + d) / denom
    return _add(la, _mul(_sub(lb, la), t))


def _split_triangle(a, b, c, fa, fb, fc, normal, d):
    # Rotate the corners so that c lies alone on its side of the plane.
    if fa * fc >= 0:
        a, b, c = c, a, b
        fa, fb, fc = fc, fa, fb
    elif fb * fc >= 0:
        a, b, c = b, c, a
        fa, fb, fc = fb, fc, fa

    origin = (0.0, 0.0, 0.0)
    hit_a = _ray_plane_intersection(a, c, normal, d) or origin
    hit_b = _ray_plane_intersection(b, c, normal, d) or origin

    if fc >= 0:
        triangles = [a, b, hit_a, b, hit_b, hit_a]
    else:
        triangles = [hit_a, hit_b, c]
    return triangles, [hit_a, hit_b]


def _snap(value):
    return 0.0 if abs(value) < 2 * _FLOAT_EPSILON else value


def tri_plane(positions, normal, d):
    """Clip a triangle list against the plane ``dot(normal, p) + d = 0``.

    The part on the positive side is removed. Returns the clipped triangle
    list and the vertices created on the plane. A list whose length is not a
    multiple of three is returned unchanged with no new vertices.
    """
    positions = [tuple(float(c) for c in p) for p in positions]
    normal = tuple(float(c) for c in normal)
    if len(positions) % 3 != 0:
        return positions, []

    out = []
    new_vertices = []
    for a, b, c in zip(positions[0::3], positions[1::3], positions[2::3]):
        fa = _snap(_dot(normal, a) + d)
        fb = _snap(_dot(normal, b) + d)
        fc = _snap(_dot(normal, c) + d)
        if fa >= 0 and fb >= 0 and fc >= 0:
            continue
        if fa <= 0 and fb <= 0 and fc <= 0:
            out.extend((a, b, c))
            continue
        triangles, created = _split_triangle(a, b, c, fa, fb, fc, normal, d)
        out.extend(triangles)
        new_vertices.extend(created)
    return out, new_vertices


def mesh_plane(positions, normal, d):
    """Clip a closed triangle mesh and close the cut with a triangle fan."""
    normal = tuple(float(c) for c in normal)
    clipped, new_vertices = tri_plane(positions, normal, d)
    if len(new_vertices) < 3:
        return clipped

    unique = []
    for vertex in sorted(new_vertices):
        if not unique or unique[-1] != vertex:
            unique.append(vertex)

    center = _mul(
        (
            sum(v[0] for v in unique),
            sum(v[1] for v in unique),
            sum(v[2] for v in unique),
        ),
        1.0 / len(unique),
    )
    reference = _normalize(_sub(unique[0], center))

    def angle(vertex):
        direction = _normalize(_sub(vertex, center))
        cosine = _dot(reference, direction)
        sine = _dot(_cross(direction, reference), normal)
        return math.atan2(sine, cosine)

    ordered = sorted(unique, key=angle, reverse=True)
    for previous, current in zip(ordered[1:], ordered[2:]):
        clipped.extend((ordered[0], previous, current))
    return clipped


def mesh_plane_flat(values, normal, d):
    """Like :func:`mesh_plane`, on a flat ``x, y, z, x, y, z, ...`` sequence."""
    values = [float(v) for v in values]
    count = len(values) // 3
    positions = [tuple(values[3 * i:3 * i + 3]) for i in range(count)]
    return [c for vertex in mesh_plane(positions, normal, d) for c in vertex]