# raykit

A small, dependency-free toolkit of building blocks for simple ray tracers
in Python.

## Modules

- `raykit.vector`: `Vector3f` and `Vector2f`, with component-wise
  arithmetic, plus `dot_product`, `cross_product`, `normalize`, `lerp`,
  `elementwise_min` and `elementwise_max`. `Vector3f(x)` fills all three
  components with `x`. `Vector3f.norm()` gives the length and
  `Vector3f.normalized()` the unit vector. The free function `normalize`
  returns a zero vector unchanged.
- `raykit.ray`: `Ray(origin, direction, t=0.0)`, which keeps a precomputed
  `direction_inv`. `Ray.at(t)` returns `origin + direction * t`. Calling the
  ray, as in `ray(t)`, does the same.
- `raykit.optics`: `clamp(lo, hi, value)`, `reflect(incident, normal)`,
  `refract(incident, normal, ior)` and `fresnel(incident, normal, ior)`.
  `refract` uses Snell's law and returns a zero vector on total internal
  reflection. `fresnel` returns the fraction of light that is reflected.
- `raykit.intersect`: `ray_triangle_intersect(v0, v1, v2, origin, direction)`
  returns a `TriangleHit(t, u, v)`. It returns `None` when the ray misses,
  runs parallel to the triangle or meets its back face.
- `raykit.obj.geometry`: the records used by the loader (`Vector2`,
  `Vector3`, `Vertex`, `Material`, `Mesh`) and the helpers `cross`, `dot`,
  `magnitude`, `angle_between` and `project`.
- `raykit.obj.algorithm`: parsing and geometry helpers: `split`, `tail`,
  `first_token`, `get_element` (OBJ 1-based and negative indices),
  `same_side`, `triangle_normal` and `in_triangle`.
- `raykit.obj.triangulate`: `vertices_from_face` builds the vertices of an
  `f` line. It accepts `p`, `p/t`, `p//n` and `p/t/n` elements. When a
  normal is missing, every vertex gets the face normal. `triangulate`
  ear-clips a polygon into triangle indices.
- `raykit.obj.loader`: `Loader`, which reads OBJ models and MTL libraries.

## Example

```python
from raykit.vector import Vector3f
from raykit.ray import Ray
from raykit.optics import reflect, fresnel
from raykit.intersect import ray_triangle_intersect

ray = Ray(Vector3f(0.25, 0.25, -1.0), Vector3f(0.0, 0.0, 1.0))
hit = ray_triangle_intersect(
    Vector3f(0, 0, 0), Vector3f(0, 1, 0), Vector3f(1, 0, 0),
    ray.origin, ray.direction,
)
if hit is not None:
    point = ray.at(hit.t)

normal = Vector3f(0.0, 0.0, -1.0)
bounced = reflect(ray.direction, normal)
kr = fresnel(ray.direction, normal, 1.5)
```

## Loading a model

```python
from raykit.obj.loader import Loader

loader = Loader()
if loader.load_file("model.obj"):
    for mesh in loader.loaded_meshes:
        print(mesh.name, len(mesh.vertices), len(mesh.indices))
```

`Loader.load_file(path)` clears the loaded meshes, vertices and indices
before it reads the file. It returns `True` when geometry was found and
`False` when the file holds none. It raises `ValueError` when the path does
not end in `.obj` or when a number is malformed. It raises `OSError` when
the file cannot be opened.

A new mesh starts at each `o` or `g` line, and also at each `usemtl` line
that follows geometry. All loaded vertices and indices are also collected
in `loaded_vertices` and `loaded_indices`.

A `mtllib` line loads the named `.mtl` file from the model's directory. If
that library cannot be read, a warning is logged and loading goes on. After
loading, the meshes take the materials named by the `usemtl` lines in
order: the first mesh takes the first name, and so on.

`Loader.load_materials(path)` reads an `.mtl` file and appends its materials
to `loaded_materials`. It returns the materials read by that call. It raises
`ValueError` for a path without the `.mtl` suffix and `OSError` when the
file cannot be opened.

Progress and material messages go to the `raykit.obj.loader` logger.

## What it does not do

raykit gives you the pieces of a ray tracer, not a renderer. It has no
scene container, no acceleration structure such as a BVH, and no light
sampling or path-tracing loop. It does not write images and has no command
line.

## Running the tests

```
pip install .[test]
pytest
```