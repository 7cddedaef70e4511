"""Reading Wavefront OBJ models and their MTL material libraries."""

from __future__ import annotations

import copy
import logging
import os
import re
from typing import Union

from raykit.obj.algorithm import first_token, split, tail
from raykit.obj.geometry import Material, Mesh, Vector2, Vector3, Vertex
from raykit.obj.triangulate import triangulate, vertices_from_face

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_PROGRESS_EVERY = 1000

_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _to_float(text: str) -> float:
    """Parse the leading number of text, ignoring what follows it."""
    match = _FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group(1))


def _to_int(text: str) -> int:
    """Parse the leading integer of text, ignoring what follows it."""
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _numbers(line: str, count: int) -> list[float]:
    """The first ``count`` numbers after the keyword of a line."""
    parts = split(tail(line), " ")
    if len(parts) < count:
        raise ValueError(f"expected {count} values in line {line!r}")
    return [_to_float(part) for part in parts[:count]]


def _lines(handle):
    for raw in handle:
        yield raw[:-1] if raw.endswith("\n") else raw


class Loader:
    """Loads meshes, vertices, indices and materials from OBJ files."""

    def __init__(self) -> None:
        self.loaded_meshes: list[Mesh] = []
        self.loaded_vertices: list[Vertex] = []
        self.loaded_indices: list[int] = []
        self.loaded_materials: list[Material] = []

    def load_file(self, path: PathLike) -> bool:
        """Load an ``.obj`` file, replacing meshes, vertices and indices.

        Returns whether anything was loaded. Raises ValueError for a file
        without the ``.obj`` suffix or with malformed numbers, and OSError
        when the file cannot be opened.
        """
        path_str = os.fspath(path)
        if not path_str.endswith(".obj"):
            raise ValueError(f"not an .obj file: {path_str!r}")

        with open(path_str, encoding="utf-8", errors="replace") as handle:
            self.loaded_meshes.clear()
            self.loaded_vertices.clear()
            self.loaded_indices.clear()

            positions: list[Vector3] = []
            tcoords: list[Vector2] = []
            normals: list[Vector3] = []
            vertices: list[Vertex] = []
            indices: list[int] = []
            material_names: list[str] = []
            listening = False
            mesh_name = ""

            for line_number, line in enumerate(_lines(handle), start=1):
                if line_number % _PROGRESS_EVERY == 0 and mesh_name:
                    logger.debug(
                        "%s | vertices > %d | texcoords > %d | normals > %d | triangles > %d",
                        mesh_name, len(positions), len(tcoords), len(normals),
                        len(vertices) // 3,
                    )

                token = first_token(line)
                if token in ("o", "g") or line.startswith("g"):
                    named = token in ("o", "g")
                    if listening and vertices and indices:
                        self.loaded_meshes.append(Mesh(vertices, indices, mesh_name))
                        vertices, indices = [], []
                        mesh_name = tail(line)
                    else:
                        listening = True
                        mesh_name = tail(line) if named else "unnamed"
                elif token == "v":
                    positions.append(Vector3(*_numbers(line, 3)))
                elif token == "vt":
                    tcoords.append(Vector2(*_numbers(line, 2)))
                elif token == "vn":
                    normals.append(Vector3(*_numbers(line, 3)))
                elif token == "f":
                    face = vertices_from_face(positions, tcoords, normals, line)
                    vertices.extend(face)
                    self.loaded_vertices.extend(copy.deepcopy(face))
                    base = len(vertices) - len(face)
                    loaded_base = len(self.loaded_vertices) - len(face)
                    for index in triangulate(face):
                        indices.append(base + index)
                        self.loaded_indices.append(loaded_base + index)
                elif token == "usemtl":
                    material_names.append(tail(line))
                    if vertices and indices:
                        self.loaded_meshes.append(
                            Mesh(vertices, indices, f"{mesh_name}_2")
                        )
                        vertices, indices = [], []
                elif token == "mtllib":
                    directory = "".join(part + "/" for part in split(path_str, "/")[:-1])
                    self._load_library(directory + tail(line))

            if vertices and indices:
                self.loaded_meshes.append(Mesh(vertices, indices, mesh_name))

        for mesh, material_name in zip(self.loaded_meshes, material_names):
            material = next(
                (m for m in self.loaded_materials if m.name == material_name), None
            )
            if material is not None:
                mesh.material = copy.deepcopy(material)

        return bool(self.loaded_meshes or self.loaded_vertices or self.loaded_indices)

    def _load_library(self, material_path: str) -> None:
        logger.info("find materials in: %s", material_path)
        if not material_path.endswith(".mtl"):
            logger.warning("skipping material library %s: not an .mtl file", material_path)
            return
        try:
            self.load_materials(material_path)
        except OSError as exc:
            logger.warning("cannot read material library %s: %s", material_path, exc)

    def load_materials(self, path: PathLike) -> list[Material]:
        """Read an ``.mtl`` file and append its materials to ``loaded_materials``.

        Returns the materials read by this call. Raises ValueError for a file
        without the ``.mtl`` suffix or with malformed numbers, and OSError
        when the file cannot be opened.
        """
        path_str = os.fspath(path)
        if not path_str.endswith(".mtl"):
            raise ValueError(f"not an .mtl file: {path_str!r}")

        found: list[Material] = []
        with open(path_str, encoding="utf-8", errors="replace") as handle:
            current = Material()
            listening = False
            for line in _lines(handle):
                token = first_token(line)
                if token == "newmtl":
                    if listening:
                        found.append(current)
                        current = Material()
                    listening = True
                    current.name = tail(line) if len(line) > 7 else "none"
                elif token in ("Ka", "Kd", "Ks"):
                    parts = split(tail(line), " ")
                    if len(parts) != 3:
                        continue
                    colour = Vector3(*(_to_float(part) for part in parts))
                    setattr(current, token.lower(), colour)
                elif token == "Ns":
                    current.ns = _to_float(tail(line))
                elif token == "Ni":
                    current.ni = _to_float(tail(line))
                elif token == "d":
                    current.d = _to_float(tail(line))
                elif token == "illum":
                    current.illum = _to_int(tail(line))
                elif token in ("map_Ka", "map_Kd", "map_Ks", "map_Ns", "map_d"):
                    setattr(current, token.lower(), tail(line))
                elif token in ("map_Bump", "map_bump", "bump"):
                    current.map_bump = tail(line)
            found.append(current)

        self.loaded_materials.extend(found)
        return found