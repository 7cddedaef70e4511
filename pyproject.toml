[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raykit"
version = "0.1.0"
description = "Small ray-tracing toolkit: vectors, rays, optics helpers, ray/triangle intersection and a Wavefront OBJ/MTL loader"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "obj", "wavefront", "mtl", "geometry", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
