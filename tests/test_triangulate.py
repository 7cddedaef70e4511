import pytest

from raykit.obj.geometry import Vector2, Vector3, Vertex, dot
from raykit.obj.triangulate import triangulate, vertices_from_face


POSITIONS = [Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0)]
TCOORDS = [Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(0.0, 1.0)]
NORMALS = [Vector3(0, 0, 1)]


def _polygon(*points):
    return [Vertex(position=Vector3(*p)) for p in points]


def test_positions_only_face():
    verts = vertices_from_face(POSITIONS, TCOORDS, NORMALS, "f 1 2 3")
    assert [v.position for v in verts] == POSITIONS
    assert all(v.texture_coordinate == Vector2(0, 0) for v in verts)


def test_positions_only_face_gets_shared_perpendicular_normal():
    verts = vertices_from_face(POSITIONS, TCOORDS, NORMALS, "f 1 2 3")
    n = verts[0].normal
    assert all(v.normal == n for v in verts)
    assert dot(n, POSITIONS[1] - POSITIONS[0]) == pytest.approx(0)
    assert dot(n, POSITIONS[2] - POSITIONS[0]) == pytest.approx(0)
    assert dot(n, n) > 0


def test_position_and_texture_face():
    verts = vertices_from_face(POSITIONS, TCOORDS, NORMALS, "f 1/3 2/2 3/1")
    assert [v.texture_coordinate for v in verts] == [TCOORDS[2], TCOORDS[1], TCOORDS[0]]
    assert all(dot(v.normal, v.normal) > 0 for v in verts)


def test_position_and_normal_face():
    verts = vertices_from_face(POSITIONS, TCOORDS, NORMALS, "f 1//1 2//1 3//1")
    assert all(v.normal == NORMALS[0] for v in verts)
    assert all(v.texture_coordinate == Vector2(0, 0) for v in verts)


def test_full_face():
    verts = vertices_from_face(POSITIONS, TCOORDS, NORMALS, "f 1/1/1 2/2/1 3/3/1")
    assert [v.position for v in verts] == POSITIONS
    assert [v.texture_coordinate for v in verts] == TCOORDS
    assert all(v.normal == NORMALS[0] for v in verts)


def test_negative_indices_match_positive():
    forward = vertices_from_face(POSITIONS, TCOORDS, NORMALS, "f 1 2 3")
    backward = vertices_from_face(POSITIONS, TCOORDS, NORMALS, "f -3 -2 -1")
    assert backward == forward


def test_vertices_are_copies():
    positions = [Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0)]
    verts = vertices_from_face(positions, TCOORDS, NORMALS, "f 1//1 2//1 3//1")
    verts[0].position.x = 42.0
    assert positions[0] == Vector3(0, 0, 0)


def test_face_with_bad_index_raises():
    with pytest.raises(IndexError):
        vertices_from_face(POSITIONS, TCOORDS, NORMALS, "f 1 2 9")


def test_triangulate_too_few():
    assert triangulate(_polygon((0, 0, 0), (1, 0, 0))) == []


def test_triangulate_triangle():
    assert triangulate(_polygon((0, 0, 0), (1, 0, 0), (0, 1, 0))) == [0, 1, 2]


def test_triangulate_square():
    square = _polygon((0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0))
    assert triangulate(square) == [0, 1, 3, 1, 2, 3]


def test_triangulate_convex_pentagon_covers_all_vertices():
    pentagon = _polygon((0, 0, 0), (2, 0, 0), (3, 2, 0), (1, 3, 0), (-1, 2, 0))
    indices = triangulate(pentagon)
    assert len(indices) == 3 * (len(pentagon) - 2)
    assert set(indices) == set(range(len(pentagon)))
    triangles = [indices[k:k + 3] for k in range(0, len(indices), 3)]
    assert all(len(set(tri)) == 3 for tri in triangles)


def test_triangulate_hexagon_indices_in_range():
    hexagon = _polygon((0, 0, 0), (2, 0, 0), (3, 1, 0), (2, 2, 0), (0, 2, 0), (-1, 1, 0))
    indices = triangulate(hexagon)
    assert indices
    assert len(indices) % 3 == 0
    assert all(0 <= k < len(hexagon) for k in indices)
    assert len(set(indices[:3])) == 3


def test_triangulate_face_from_line():
    positions = [Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(1, 1, 0), Vector3(0, 1, 0)]
    verts = vertices_from_face(positions, [], [], "f 1 2 3 4")
    indices = triangulate(verts)
    assert len(indices) == 6
    assert set(indices) == {0, 1, 2, 3}